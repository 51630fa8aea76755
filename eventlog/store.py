"""Filesystem access used by rotation and writing."""

import os
from typing import Protocol, runtime_checkable

from eventlog.errors import (
    DirectoryUnavailable,
    FileOpenFailure,
    RotationProbeFailure,
    WriteFailure,
)


@runtime_checkable
class FileStore(Protocol):
    def exists(self, path: str) -> bool: ...

    def size(self, path: str) -> int: ...

    def ensure_dir(self, path: str) -> None: ...

    def append_text(self, path: str, text: str) -> int: ...


class LocalFileStore:
    """FileStore backed by the local filesystem."""

    def exists(self, path: str) -> bool:
        """True if path exists. Raises RotationProbeFailure if stat fails for another reason."""
        try:
            os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise RotationProbeFailure(f"Cannot stat {path}: {e}", path) from e
        return True

    def size(self, path: str) -> int:
        """Current length in bytes, 0 for a missing file."""
        try:
            return os.stat(path).st_size
        except (FileNotFoundError, NotADirectoryError):
            return 0
        except OSError as e:
            raise RotationProbeFailure(f"Cannot stat {path}: {e}", path) from e

    def ensure_dir(self, path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise DirectoryUnavailable(f"Cannot create log directory {path}: {e}", path) from e

    def append_text(self, path: str, text: str) -> int:
        """Append text as UTF-8, flush and close. Returns bytes written."""
        data = text.encode("utf-8", errors="replace")
        try:
            f = open(path, "ab")
        except OSError as e:
            raise FileOpenFailure(f"Cannot open {path} for append: {e}", path) from e
        with f:
            try:
                f.write(data)
                f.flush()
            except OSError as e:
                raise WriteFailure(f"Write to {path} failed: {e}", path) from e
        return len(data)
