"""Single-file durable storage with atomic replace semantics."""

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog

from ..config.defaults import StorageParams
from ..errors import PersistenceError, StorageNotFoundError

logger = structlog.get_logger(__name__)


class ProspectFileStorage:
    """
    Reads and writes the persisted prospect document.

    Writes go to a temporary file in the target directory, are flushed (and
    fsync'd when enabled), then moved over the target with ``os.replace``.
    After a crash either the previous file or the complete new file is on
    disk, never a partial one.
    """

    def __init__(self, path: Path, file_mode: int = 0o600, fsync: bool = True):
        self.path = Path(path)
        self.file_mode = file_mode
        self.fsync = fsync
        self.logger = logger.bind(path=str(self.path))

    @classmethod
    def from_params(cls, params: StorageParams) -> "ProspectFileStorage":
        """Build storage from configuration, expanding ``~`` in the directory."""
        directory = Path(params.directory).expanduser()
        return cls(
            path=directory / params.file_name,
            file_mode=params.file_mode,
            fsync=params.fsync,
        )

    def exists(self) -> bool:
        """Return True if a persisted file is present."""
        return self.path.exists()

    def read_bytes(self) -> bytes:
        """
        Read the full persisted document.

        Raises:
            StorageNotFoundError: If nothing has been persisted yet
            PersistenceError: On any other I/O failure
        """
        try:
            return self.path.read_bytes()
        except FileNotFoundError as e:
            raise StorageNotFoundError(
                f"No stored data at {self.path}",
                operation="read",
                target=str(self.path)
            ) from e
        except OSError as e:
            raise PersistenceError(
                f"Failed to read {self.path}: {e}",
                operation="read",
                target=str(self.path)
            ) from e

    def write_bytes_atomic(self, data: bytes) -> int:
        """
        Atomically replace the persisted document.

        Args:
            data: Complete encoded document

        Returns:
            Number of bytes written

        Raises:
            PersistenceError: If any step fails; the previous file is left intact
        """
        tmp_path: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                if self.fsync:
                    os.fsync(f.fileno())

            os.chmod(tmp_path, self.file_mode)
            os.replace(tmp_path, self.path)
            tmp_path = None

            if self.fsync:
                self._fsync_directory()

            return len(data)

        except OSError as e:
            raise PersistenceError(
                f"Failed to write {self.path}: {e}",
                operation="write",
                target=str(self.path)
            ) from e

        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    self.logger.warning("Failed to remove temporary file", tmp_path=tmp_path)

    def quarantine(self, reason: str = "corrupt") -> Optional[Path]:
        """
        Move an unreadable file aside so the next save does not overwrite it.

        Returns:
            The new path, or None if there was nothing to move or the move failed
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        quarantined = self.path.with_name(f"{self.path.name}.{reason}-{timestamp}")

        try:
            self.path.rename(quarantined)
        except FileNotFoundError:
            return None
        except OSError as e:
            self.logger.error("Failed to quarantine unreadable file", error=str(e))
            return None

        self.logger.warning(
            "Unreadable file moved aside",
            quarantined_path=str(quarantined),
            reason=reason
        )
        return quarantined

    def _fsync_directory(self) -> None:
        """Persist the rename itself by syncing the parent directory."""
        try:
            dir_fd = os.open(self.path.parent, os.O_RDONLY)
        except OSError:
            return
        try:
            os.fsync(dir_fd)
        except OSError:
            # Not every platform/file system supports fsync on directories
            pass
        finally:
            os.close(dir_fd)
