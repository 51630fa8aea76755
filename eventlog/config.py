"""Configuration — frozen dataclass from env vars, optionally seeded by a YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

from eventlog.rotation import DEFAULT_MAX_SUFFIX, PROBE_FAILURE_MODES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    log_dir: str = "./logs"
    tag: str = "FileLogger"
    max_file_size_bytes: int = 1024 * 1024  # 1 MB
    max_suffix: int = DEFAULT_MAX_SUFFIX
    probe_failure_mode: str = "keep_current"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path or file missing."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        logger.info("Loaded YAML config from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config: env vars override YAML values, which override defaults."""
    data = yaml_data or {}
    if not isinstance(data, dict):
        raise ValueError(f"yaml_data must be a mapping, got {type(data).__name__}")

    # MAX_FILE_SIZE_BYTES takes precedence over MAX_FILE_SIZE_MB
    raw_bytes = os.environ.get("MAX_FILE_SIZE_BYTES")
    raw_mb = os.environ.get("MAX_FILE_SIZE_MB")
    if raw_bytes is not None:
        max_size = int(raw_bytes)
    elif raw_mb is not None:
        max_size = int(float(raw_mb) * 1024 * 1024)
    else:
        max_size = int(data.get("max_file_size_bytes", Config.max_file_size_bytes))

    config = Config(
        log_dir=os.environ.get("EVENT_LOG_DIR", data.get("log_dir", Config.log_dir)),
        tag=os.environ.get("EVENT_LOG_TAG", data.get("tag", Config.tag)),
        max_file_size_bytes=max_size,
        max_suffix=int(os.environ.get("MAX_SUFFIX", data.get("max_suffix", Config.max_suffix))),
        probe_failure_mode=str(os.environ.get(
            "PROBE_FAILURE_MODE", data.get("probe_failure_mode", Config.probe_failure_mode)
        )).strip().lower(),
    )

    if config.max_file_size_bytes <= 0:
        raise ValueError(f"max_file_size_bytes must be positive, got {config.max_file_size_bytes}")
    if config.max_suffix < 1:
        raise ValueError(f"max_suffix must be >= 1, got {config.max_suffix}")
    if config.probe_failure_mode not in PROBE_FAILURE_MODES:
        raise ValueError(f"Unknown probe_failure_mode: {config.probe_failure_mode!r}")
    return config
