"""Log record, level and file handle models."""

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

FILE_PREFIX = "events_log_"
FILE_EXTENSION = ".txt"
DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    INFO = "INFO"
    DEBUG = "DEBUG"
    WARN = "WARN"
    ERROR = "ERROR"


def _escape_line_breaks(text: str) -> str:
    # one record per physical line
    return text.replace("\r", "\\r").replace("\n", "\\n")


@dataclass(frozen=True)
class LogRecord:
    timestamp: datetime
    level: str
    message: str
    tag: str

    def format(self) -> str:
        """Render as '<YYYY-MM-DD HH:mm:ss> [<LEVEL>] <message>' (no newline)."""
        stamp = self.timestamp.strftime(TIMESTAMP_FORMAT)
        return f"{stamp} [{self.level}] {_escape_line_breaks(self.message)}"


def date_stamp(now: datetime) -> str:
    return now.strftime(DATE_FORMAT)


def log_file_name(stamp: str, suffix: int | None = None) -> str:
    if suffix is None:
        return f"{FILE_PREFIX}{stamp}{FILE_EXTENSION}"
    return f"{FILE_PREFIX}{stamp}_{suffix}{FILE_EXTENSION}"


@dataclass
class LogFileHandle:
    """The active target file. Only size_bytes changes after creation."""

    base_directory: str
    date_stamp: str
    sequence_suffix: int | None = None
    size_bytes: int = 0

    @property
    def file_name(self) -> str:
        return log_file_name(self.date_stamp, self.sequence_suffix)

    @property
    def path(self) -> str:
        return os.path.join(self.base_directory, self.file_name)
