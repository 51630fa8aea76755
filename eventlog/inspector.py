"""Inspector logic: list, read, and search event log files."""

import os
import re

from eventlog.models import FILE_EXTENSION, FILE_PREFIX

_NAME_RE = re.compile(
    re.escape(FILE_PREFIX) + r"(\d{4}-\d{2}-\d{2})(?:_(\d+))?" + re.escape(FILE_EXTENSION) + "$"
)


def parse_log_file_name(name: str) -> tuple[str, int | None] | None:
    """Return (date_stamp, suffix) for an event log file name, None otherwise."""
    m = _NAME_RE.match(name)
    if m is None:
        return None
    suffix = int(m.group(2)) if m.group(2) is not None else None
    return m.group(1), suffix


def _sort_key(name: str):
    stamp, suffix = parse_log_file_name(name)
    return stamp, suffix or 0


def list_log_files(log_dir: str) -> list[str]:
    """Event log files ordered by date, then suffix (plain file first)."""
    files = [name for name in os.listdir(log_dir) if parse_log_file_name(name) is not None]
    files.sort(key=_sort_key)
    return files


def read_file(log_dir: str, filename: str) -> str:
    path = os.path.join(log_dir, filename)
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def search_files(log_dir: str, text: str) -> list[tuple[str, int, str]]:
    """Search for text across all event log files. Returns (filename, line_num, line) tuples."""
    results = []
    for filename in list_log_files(log_dir):
        path = os.path.join(log_dir, filename)
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                for line_num, line in enumerate(f, 1):
                    if text in line:
                        results.append((filename, line_num, line.rstrip("\n")))
        except OSError:
            continue
    return results
