"""Rotating event-file logger with date- and size-based rotation."""

from eventlog.models import LogFileHandle, LogLevel, LogRecord
from eventlog.sink import LogSink

__all__ = ["LogFileHandle", "LogLevel", "LogRecord", "LogSink"]
