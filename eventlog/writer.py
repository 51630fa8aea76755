"""Append-only writer: one line per call, file reopened every time."""

from eventlog.errors import RotationProbeFailure
from eventlog.models import LogFileHandle
from eventlog.store import FileStore, LocalFileStore


class LogWriter:
    def __init__(self, store: FileStore | None = None):
        self._store = store or LocalFileStore()

    def append(self, handle: LogFileHandle, line: str) -> None:
        """Append a line to handle's file and refresh handle.size_bytes.

        Raises DirectoryUnavailable, FileOpenFailure or WriteFailure.
        """
        self._store.ensure_dir(handle.base_directory)
        written = self._store.append_text(
            handle.path, line if line.endswith("\n") else line + "\n"
        )
        try:
            handle.size_bytes = self._store.size(handle.path)
        except RotationProbeFailure:
            handle.size_bytes += written
