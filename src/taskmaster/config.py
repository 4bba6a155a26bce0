"""Configuration management for TaskMaster."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKMASTER_HOME = Path(os.environ.get("TASKMASTER_HOME", Path.home() / "taskmaster"))
CONFIG_FILE = TASKMASTER_HOME / "config" / "taskmaster.conf"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """TaskMaster configuration."""

    seed_examples: bool = True
    confirm_delete: bool = True
    pause_after_action: bool = True
    log_level: str = "WARNING"


def _parse_bool(key: str, value: str, current: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning("Ignoring %s: expected a boolean, got %r", key.upper(), value)
    return current


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskmaster.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            logger.warning("Skipping malformed config line: %r", line)
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "seed_examples":
                config.seed_examples = _parse_bool(key, value, config.seed_examples)
            case "confirm_delete":
                config.confirm_delete = _parse_bool(key, value, config.confirm_delete)
            case "pause_after_action":
                config.pause_after_action = _parse_bool(key, value, config.pause_after_action)
            case "log_level":
                level = value.upper()
                if level in logging.getLevelNamesMapping():
                    config.log_level = level
                else:
                    logger.warning("Ignoring LOG_LEVEL: unknown level %r", value)

    return config
