"""Configuration for Smart Paste."""

from .constants import (
    SMARTPASTE_DIR,
    CONFIG_FILE,
    LOG_FILE,
    LOG_LEVEL,
    SCRATCH_PREFIX,
    SCRATCH_SUFFIX,
    TMUX_BUFFER_NAME,
    FILE_TARGETS,
    IMAGE_TARGETS,
    TEXT_TARGETS,
)
from .settings import (
    load_config,
    get_config,
    get_session,
    get_scratch_dir,
    get_scratch_policy,
    get_scratch_limit,
    get_notify,
    get_fallback_managers,
    get_command_timeout,
)

__all__ = [
    "SMARTPASTE_DIR",
    "CONFIG_FILE",
    "LOG_FILE",
    "LOG_LEVEL",
    "SCRATCH_PREFIX",
    "SCRATCH_SUFFIX",
    "TMUX_BUFFER_NAME",
    "FILE_TARGETS",
    "IMAGE_TARGETS",
    "TEXT_TARGETS",
    "load_config",
    "get_config",
    "get_session",
    "get_scratch_dir",
    "get_scratch_policy",
    "get_scratch_limit",
    "get_notify",
    "get_fallback_managers",
    "get_command_timeout",
]
