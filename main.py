"""Event logger demo — writes synthetic events through a rotating LogSink."""

import argparse
import logging
import random
import signal
import sys
import time

from eventlog.config import load_config, load_yaml_config
from eventlog.models import LogLevel
from eventlog.sink import LogSink

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_running = True


def _signal_handler(sig, _frame):
    global _running
    logger.info("Shutdown signal received (signal %d), stopping...", sig)
    _running = False


LEVELS = [LogLevel.INFO, LogLevel.INFO, LogLevel.INFO, LogLevel.INFO,
          LogLevel.DEBUG, LogLevel.WARN, LogLevel.ERROR]
MESSAGES = {
    LogLevel.INFO: [
        "Device boot completed",
        "Preferences loaded",
        "Periodic sync scheduled",
        "Upload finished with HTTP 200",
    ],
    LogLevel.DEBUG: [
        "Worker started",
        "Reading cached configuration",
        "Network state changed",
    ],
    LogLevel.WARN: [
        "Sync retried after timeout",
        "Battery low, deferring work",
    ],
    LogLevel.ERROR: [
        "Upload failed: connection reset",
        "Configuration store unavailable",
    ],
}


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rotating event logger demo")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    parser.add_argument("--count", type=int, default=0,
                        help="Number of events to write (0 = until interrupted)")
    parser.add_argument("--interval", type=float, default=0.05,
                        help="Seconds between events (default: 0.05)")
    return parser


def main(argv=None):
    args = build_cli_parser().parse_args(argv)
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    config = load_config(load_yaml_config(args.config))
    logger.info(
        "Config: log_dir=%s, tag=%s, max_size=%d bytes, probe_failure_mode=%s",
        config.log_dir, config.tag, config.max_file_size_bytes, config.probe_failure_mode,
    )

    sink = LogSink.from_config(config)
    entries_written = 0
    current = sink.current_log_file()

    try:
        while _running and (args.count == 0 or entries_written < args.count):
            level = random.choice(LEVELS)
            sink.log(level, random.choice(MESSAGES[level]))
            entries_written += 1

            handle = sink.current_log_file()
            if handle is not current:
                logger.info("Rotated to %s (%d entries written so far)", handle.path, entries_written)
                current = handle

            time.sleep(args.interval)
    except KeyboardInterrupt:
        pass

    logger.info("Shut down cleanly. Total entries written: %d", entries_written)


if __name__ == "__main__":
    main()
