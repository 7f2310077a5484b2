"""Configuration settings for Smart Paste."""

import json
import logging
import os
from pathlib import Path

from .constants import (
    CONFIG_FILE,
    DEFAULT_SCRATCH_DIR,
    SCRATCH_POLICIES,
    DEFAULT_SCRATCH_POLICY,
    DEFAULT_SCRATCH_LIMIT,
    DEFAULT_FALLBACK_MANAGERS,
    DEFAULT_COMMAND_TIMEOUT,
)

logger = logging.getLogger("smartpaste")


def load_config() -> dict:
    """Load configuration from ~/.smartpaste/config.json if it exists."""
    if CONFIG_FILE.exists():
        try:
            return json.loads(CONFIG_FILE.read_text())
        except (OSError, ValueError) as e:
            logger.warning("Failed to load config: %s", e)
    return {}


def get_config(key: str, default=None):
    """Get config value from file, falling back to env var, then default."""
    config = load_config()
    if key in config:
        return config[key]
    env_key = f"SMARTPASTE_{key.upper()}"
    env_val = os.getenv(env_key)
    if env_val is not None:
        return env_val
    return default


def get_session() -> str | None:
    """Get the tmux session to paste into.

    Returns None if not set, in which case the session of the tmux client
    running the command is used, or the terminal emulator outside tmux.
    """
    val = get_config("session")
    if val and isinstance(val, str) and val.strip():
        return val.strip()
    return None


def get_scratch_dir() -> Path:
    val = get_config("scratch_dir")
    if val and isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser()
    return DEFAULT_SCRATCH_DIR


def get_scratch_policy() -> str:
    """Get scratch file cleanup policy: 'keep', 'bounded', or 'on_exit'.

    - keep: screenshots are left in the scratch directory indefinitely
    - bounded (default): only the newest `scratch_limit` screenshots are kept
    - on_exit: screenshots are deleted when the process exits
    """
    val = get_config("scratch_policy", DEFAULT_SCRATCH_POLICY)
    if isinstance(val, str) and val.strip().lower() in SCRATCH_POLICIES:
        return val.strip().lower()
    return DEFAULT_SCRATCH_POLICY


def get_scratch_limit() -> int:
    val = get_config("scratch_limit", DEFAULT_SCRATCH_LIMIT)
    if isinstance(val, int):
        return max(val, 1)
    try:
        return max(int(val), 1)
    except (ValueError, TypeError):
        return DEFAULT_SCRATCH_LIMIT


def get_notify() -> bool:
    """Check if failures should raise a desktop notification."""
    val = get_config("notify", "true")
    if isinstance(val, bool):
        return val
    return str(val).lower() == "true"


def get_fallback_managers() -> list[str]:
    """Get the terminal emulator tab managers used outside tmux."""
    val = get_config("fallback_managers")
    if val:
        if isinstance(val, list):
            return [m.strip().lower() for m in val if isinstance(m, str)]
        return [m.strip().lower() for m in str(val).split(",") if m.strip()]
    return list(DEFAULT_FALLBACK_MANAGERS)


def get_command_timeout() -> float:
    val = get_config("command_timeout", DEFAULT_COMMAND_TIMEOUT)
    try:
        return float(val)
    except (ValueError, TypeError):
        return DEFAULT_COMMAND_TIMEOUT
