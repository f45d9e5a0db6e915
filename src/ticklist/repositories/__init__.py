"""Persistence layer."""

from .codec import dump_tasks, load_tasks
from .filesystem import FilesystemMedium
from .memory import MemoryMedium
from .protocol import PersistenceMedium

__all__ = [
    "FilesystemMedium",
    "MemoryMedium",
    "PersistenceMedium",
    "dump_tasks",
    "load_tasks",
]
