import os
import threading
from datetime import datetime, timedelta

import pytest

from eventlog.errors import RotationProbeFailure, WriteFailure
from eventlog.store import LocalFileStore


class RecordingConsole:
    """ConsoleSink that keeps everything it is given."""

    def __init__(self):
        self._lock = threading.Lock()
        self.lines = []
        self.warnings = []

    def emit(self, tag, line):
        with self._lock:
            self.lines.append((tag, line))

    def warn(self, tag, message, exc=None):
        with self._lock:
            self.warnings.append((tag, message, exc))


class FaultyStore(LocalFileStore):
    """Local store that fails stats on chosen file names, or every append."""

    def __init__(self, fail_names=(), fail_append=False):
        self.fail_names = set(fail_names)
        self.fail_append = fail_append

    def _check(self, path):
        if os.path.basename(path) in self.fail_names:
            raise RotationProbeFailure(f"Permission denied: {path}", path)

    def exists(self, path):
        self._check(path)
        return super().exists(path)

    def size(self, path):
        self._check(path)
        return super().size(path)

    def append_text(self, path, text):
        if self.fail_append:
            raise WriteFailure(f"No space left on device: {path}", path)
        return super().append_text(path, text)


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


def _make_file(directory, name, size=0):
    path = os.path.join(str(directory), name)
    with open(path, "wb") as f:
        f.truncate(size)
    return path


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def clock():
    return Clock(datetime(2024, 1, 1, 12, 0, 0))


@pytest.fixture
def make_file():
    """Create a (sparse) file of the given apparent size."""
    return _make_file


@pytest.fixture
def faulty_store():
    return FaultyStore()
