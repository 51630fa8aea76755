"""CLI log inspector — list, read, and search event log files."""

import argparse
import os
import sys
from datetime import datetime

from eventlog.config import load_config, load_yaml_config
from eventlog.errors import EventLogError
from eventlog.inspector import list_log_files, read_file, search_files
from eventlog.rotation import RotationPolicy


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Inspect event log files")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    parser.add_argument("--log-dir", default=None,
                        help="Directory containing log files (default: from config)")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List all event log files")
    group.add_argument("--read", metavar="FILENAME", help="Read a specific log file")
    group.add_argument("--search", metavar="TEXT", help="Search text across all log files")
    group.add_argument("--current", action="store_true",
                       help="Print the file the logger would write to now")
    args = parser.parse_args(argv)

    config = load_config(load_yaml_config(args.config))
    log_dir = args.log_dir or config.log_dir

    if args.current:
        policy = RotationPolicy(log_dir, max_suffix=config.max_suffix,
                                probe_failure_mode=config.probe_failure_mode)
        try:
            handle = policy.next_file_name(datetime.now(), config.max_file_size_bytes)
        except EventLogError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(handle.path)
        return 0

    if not os.path.isdir(log_dir):
        print(f"Error: log directory not found: {log_dir}", file=sys.stderr)
        return 1

    if args.list:
        files = list_log_files(log_dir)
        if not files:
            print("No log files found.")
            return 0
        for name in files:
            size = os.path.getsize(os.path.join(log_dir, name))
            print(f"  {name}  ({_format_size(size)})")

    elif args.read:
        try:
            sys.stdout.write(read_file(log_dir, args.read))
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    elif args.search:
        results = search_files(log_dir, args.search)
        if not results:
            print(f"No matches found for '{args.search}'.")
            return 0
        for filename, line_num, line in results:
            print(f"  [{filename}:{line_num}] {line}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
