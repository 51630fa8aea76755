"""Date- and size-based rotation for events_log_<date>[_<n>].txt files."""

import logging
import os
from datetime import datetime

from eventlog.errors import RotationProbeFailure
from eventlog.models import LogFileHandle, date_stamp
from eventlog.store import FileStore, LocalFileStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUFFIX = 10_000
PROBE_FAILURE_MODES = ("keep_current", "treat_absent")


class RotationPolicy:
    """Decides which file the next line goes to.

    Naming depends only on the directory contents and the date, so a restarted
    process picks up where the previous one left off without stored counters.

    probe_failure_mode controls what happens when a stat fails with anything
    other than "not found":
      - "keep_current": raise RotationProbeFailure; the caller falls back
        to fallback() instead of guessing a name.
      - "treat_absent": count the candidate as absent and carry on searching.
    """

    def __init__(
        self,
        log_dir: str,
        store: FileStore | None = None,
        max_suffix: int = DEFAULT_MAX_SUFFIX,
        probe_failure_mode: str = "keep_current",
    ):
        if probe_failure_mode not in PROBE_FAILURE_MODES:
            raise ValueError(f"Unknown probe_failure_mode: {probe_failure_mode!r}")
        if max_suffix < 1:
            raise ValueError("max_suffix must be >= 1")
        self._log_dir = log_dir
        self._store = store or LocalFileStore()
        self._max_suffix = max_suffix
        self._probe_failure_mode = probe_failure_mode

    @property
    def log_dir(self) -> str:
        return self._log_dir

    def needs_rotation(
        self, current: LogFileHandle, now: datetime, max_size_bytes: int
    ) -> bool:
        """True once the date has moved past the current file's date or it is oversized.

        A reading older than the current file's date never rotates back.
        """
        return current.date_stamp < date_stamp(now) or current.size_bytes > max_size_bytes

    def decide(
        self, current: LogFileHandle | None, now: datetime, max_size_bytes: int
    ) -> LogFileHandle:
        """Return current if still usable, otherwise a freshly named handle."""
        if current is None:
            return self.next_file_name(now, max_size_bytes)
        if not self.needs_rotation(current, now, max_size_bytes):
            return current
        # dates only move forward, even for a stale clock reading
        stamp = max(current.date_stamp, date_stamp(now))
        handle = self._acquire(stamp, max_size_bytes)
        logger.debug("Rotating %s -> %s", current.path, handle.path)
        return handle

    def next_file_name(self, now: datetime, max_size_bytes: int) -> LogFileHandle:
        """Plain dated file unless it is oversized, then the first free suffix."""
        return self._acquire(date_stamp(now), max_size_bytes)

    def _acquire(self, stamp: str, max_size_bytes: int) -> LogFileHandle:
        plain = LogFileHandle(self._log_dir, stamp)
        if self._exists(plain.path):
            plain.size_bytes = self._size(plain.path)
            if plain.size_bytes <= max_size_bytes:
                return plain
            return self._first_free_suffix(stamp)
        return plain

    def fallback(self, current: LogFileHandle | None, now: datetime) -> LogFileHandle:
        """Target to use when a rotation decision could not be made."""
        if current is not None:
            return current
        return LogFileHandle(self._log_dir, date_stamp(now))

    def _first_free_suffix(self, stamp: str) -> LogFileHandle:
        for n in range(1, self._max_suffix + 1):
            candidate = LogFileHandle(self._log_dir, stamp, n)
            if not self._exists(candidate.path):
                return candidate
        raise RotationProbeFailure(
            f"No free suffix up to {self._max_suffix} for {stamp}",
            os.path.join(self._log_dir, stamp),
        )

    def _exists(self, path: str) -> bool:
        try:
            return self._store.exists(path)
        except RotationProbeFailure:
            if self._probe_failure_mode == "treat_absent":
                return False
            raise

    def _size(self, path: str) -> int:
        try:
            return self._store.size(path)
        except RotationProbeFailure:
            if self._probe_failure_mode == "treat_absent":
                return 0
            raise
