from __future__ import annotations
import logging
import os
from pathlib import Path

from lithp.errors import LithpConfigError

# Defaults
DEFAULT_PROMPT = "lithp >> "
DEFAULT_HISTORY_FILE = Path.home() / ".lithp_history"
DEFAULT_HISTORY_LENGTH = 1000
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 8765

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_prompt() -> str:
    return os.environ.get("LITHP_PROMPT", DEFAULT_PROMPT)


def get_history_path() -> Path:
    raw = os.environ.get("LITHP_HISTORY_FILE")
    return Path(raw).expanduser() if raw else DEFAULT_HISTORY_FILE


def get_history_length() -> int:
    return int_from_env("LITHP_HISTORY_LENGTH", DEFAULT_HISTORY_LENGTH)


def get_log_level() -> str:
    return os.environ.get("LITHP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_server_address() -> tuple[str, int]:
    host = os.environ.get("LITHP_SERVER_HOST", DEFAULT_SERVER_HOST)
    return host, int_from_env("LITHP_SERVER_PORT", DEFAULT_SERVER_PORT)


def resolve_log_level(level: str | int | None) -> int:
    """Map a level name (or number) to a logging level, rejecting unknown names."""
    if level is None:
        level = get_log_level()
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise LithpConfigError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: str | int | None = None) -> None:
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
