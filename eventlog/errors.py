"""Failures raised by the file store, rotation policy and writer."""


class EventLogError(Exception):
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class DirectoryUnavailable(EventLogError):
    """Log directory missing and could not be created."""


class FileOpenFailure(EventLogError):
    """Log file could not be opened for appending."""


class WriteFailure(EventLogError):
    """Write or flush to an open log file failed."""


class RotationProbeFailure(EventLogError):
    """Could not tell whether a candidate log file exists."""
