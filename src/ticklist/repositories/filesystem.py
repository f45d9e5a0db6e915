"""Filesystem-backed persistence medium."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..errors import DeserializationFailure

logger = logging.getLogger(__name__)


class FilesystemMedium:
    """
    Medium storing each key as a YAML file under a data directory.

    Key ``tasks`` lives at ``<root>/tasks.yaml``. Writes go to a temporary
    file in the same directory which is then renamed over the target.
    """

    SUFFIX = ".yaml"

    def __init__(self, root: Path) -> None:
        """
        Initialize medium.

        Args:
            root: Directory holding the stored files (created on first save)
        """
        self.root = root

    def ensure_directory(self) -> None:
        """Create the data directory if it doesn't exist."""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """Get the file path used for a key."""
        return self.root / f"{key}{self.SUFFIX}"

    def save(self, key: str, text: str) -> None:
        """Atomically write text for key."""
        self.ensure_directory()
        target = self.path_for(key)

        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Saved %s (%d bytes)", target, len(text))

    def load(self, key: str) -> str | None:
        """Read text for key, or None if nothing has been saved yet.

        Raises:
            DeserializationFailure: If the file is not valid UTF-8.
        """
        path = self.path_for(key)
        if not path.exists():
            logger.debug("No stored data at %s", path)
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationFailure(f"{path} is not valid UTF-8: {e}") from e

    def validate(self) -> tuple[bool, str | None]:
        """Check that the data directory is usable.

        Returns:
            (True, None) if the directory exists or could be created,
            otherwise (False, reason).
        """
        try:
            self.ensure_directory()
            return (True, None)
        except OSError as e:
            return (False, f"Cannot access data directory: {e}")
