"""Disk storage for uploaded document blobs.

Files are named from the original filename plus the upload time in epoch
milliseconds, with every character outside ``[A-Za-z0-9_-]`` in the stem
replaced by an underscore.
"""

import asyncio
import logging
import re
import time
from pathlib import Path

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9\-_]")


def build_storage_name(original_filename: str, timestamp_ms: int) -> str:
    """Build the on-disk name for an upload."""
    name = Path(original_filename).name
    ext = Path(name).suffix
    stem = name[: -len(ext)] if ext else name
    return f"{_UNSAFE_CHARS.sub('_', stem)}_{timestamp_ms}{ext}"


class FileStorage:
    """Stores raw uploads under a single directory."""

    def __init__(self, upload_dir: str | Path) -> None:
        self.upload_dir = Path(upload_dir)

    def ensure_dir(self) -> None:
        """Create the upload directory if it does not exist."""
        if not self.upload_dir.exists():
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Created uploads directory: %s", self.upload_dir)

    async def save(self, content: bytes, original_filename: str) -> Path:
        """Write an upload to disk and return its path."""
        filename = build_storage_name(original_filename, int(time.time() * 1000))
        path = self.upload_dir / filename
        await asyncio.to_thread(self._write_sync, path, content)
        logger.debug("Stored upload %s (%d bytes)", path, len(content))
        return path

    def _write_sync(self, path: Path, content: bytes) -> None:
        self.ensure_dir()
        path.write_bytes(content)

    def delete(self, path: str | Path | None) -> bool:
        """Best-effort removal of a stored file.

        Returns:
            True if a file was removed. Missing files and OS errors are
            logged and reported as False.
        """
        if path is None:
            return False
        try:
            Path(path).unlink()
            return True
        except FileNotFoundError:
            logger.info("Stored file already removed: %s", path)
            return False
        except OSError as e:
            logger.warning("Error deleting file %s: %s", path, e)
            return False
