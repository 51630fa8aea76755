"""LogSink — leveled logging to rotating event files, mirrored to the console."""

import threading
from datetime import datetime

from eventlog.config import Config
from eventlog.console import ConsoleSink, LoggingConsoleSink
from eventlog.errors import EventLogError, RotationProbeFailure
from eventlog.models import LogFileHandle, LogLevel, LogRecord
from eventlog.rotation import DEFAULT_MAX_SUFFIX, RotationPolicy
from eventlog.store import FileStore, LocalFileStore
from eventlog.writer import LogWriter

DEFAULT_TAG = "FileLogger"
MAX_FILE_SIZE = 1024 * 1024

_LEVEL_ALIASES = {"WARNING": LogLevel.WARN.value}


def _level_name(level) -> str:
    if isinstance(level, LogLevel):
        return level.value
    name = str(level).strip().upper()
    return _LEVEL_ALIASES.get(name, name)


class LogSink:
    """Thread-safe file logger with daily and size-based rotation.

    Each call picks the target file (rotating if the date changed or the
    current file grew past max_size_bytes) and appends one flushed line.
    Errors never reach the caller; they are reported on the console only.
    """

    def __init__(
        self,
        log_dir: str,
        tag: str | None = DEFAULT_TAG,
        max_size_bytes: int = MAX_FILE_SIZE,
        console: ConsoleSink | None = None,
        store: FileStore | None = None,
        time_func=None,
        max_suffix: int = DEFAULT_MAX_SUFFIX,
        probe_failure_mode: str = "keep_current",
    ):
        self._tag = tag or DEFAULT_TAG
        self._max_size_bytes = max_size_bytes
        self._console = console or LoggingConsoleSink()
        self._time_func = time_func or datetime.now
        store = store or LocalFileStore()
        self._policy = RotationPolicy(log_dir, store, max_suffix, probe_failure_mode)
        self._writer = LogWriter(store)
        self._lock = threading.Lock()
        self._handle: LogFileHandle | None = None

        with self._lock:
            probe_error = self._rotate_if_needed(self._time_func())
            path = self._handle.path
        if probe_error is not None:
            self._report_probe_failure(probe_error, path)

    @classmethod
    def from_config(
        cls,
        config: Config,
        console: ConsoleSink | None = None,
        store: FileStore | None = None,
        time_func=None,
    ) -> "LogSink":
        return cls(
            config.log_dir,
            tag=config.tag,
            max_size_bytes=config.max_file_size_bytes,
            console=console,
            store=store,
            time_func=time_func,
            max_suffix=config.max_suffix,
            probe_failure_mode=config.probe_failure_mode,
        )

    @property
    def tag(self) -> str:
        return self._tag

    def current_log_file(self) -> LogFileHandle | None:
        """Handle chosen by the most recent rotation decision."""
        return self._handle

    def _rotate_if_needed(self, now: datetime) -> RotationProbeFailure | None:
        """Update the active handle. Caller must hold the lock."""
        try:
            self._handle = self._policy.decide(self._handle, now, self._max_size_bytes)
        except RotationProbeFailure as e:
            self._handle = self._policy.fallback(self._handle, now)
            return e
        return None

    def _report_probe_failure(self, error: RotationProbeFailure, path: str):
        self._console.warn(
            self._tag,
            f"Rotation probe failed, continuing with {path}",
            error,
        )

    def log(self, level, message) -> None:
        now = self._time_func()
        record = LogRecord(now.replace(microsecond=0), _level_name(level), str(message), self._tag)
        line = record.format()

        self._console.emit(self._tag, line)

        write_error = None
        with self._lock:
            probe_error = self._rotate_if_needed(now)
            path = self._handle.path
            try:
                self._writer.append(self._handle, line)
            except EventLogError as e:
                write_error = e

        if probe_error is not None:
            self._report_probe_failure(probe_error, path)
        if write_error is not None:
            self._console.warn(self._tag, "Failed to write log to file", write_error)

    def log_info(self, message) -> None:
        self.log(LogLevel.INFO, message)

    def log_debug(self, message) -> None:
        self.log(LogLevel.DEBUG, message)

    def log_warning(self, message) -> None:
        self.log(LogLevel.WARN, message)

    def log_error(self, message) -> None:
        self.log(LogLevel.ERROR, message)
