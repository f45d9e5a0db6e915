"""Persistence medium protocol."""

from typing import Protocol


class PersistenceMedium(Protocol):
    """Opaque string-keyed text store.

    The task store writes the whole serialized list under a single key after
    every mutation and reads it back once at startup. Implementations only
    need to guarantee that a single ``save`` is atomic.
    """

    def save(self, key: str, text: str) -> None:
        """Store text under key, replacing any previous value."""
        ...

    def load(self, key: str) -> str | None:
        """Return the text stored under key, or None if absent."""
        ...
