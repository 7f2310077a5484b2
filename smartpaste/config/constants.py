"""Constants for Smart Paste."""

import os
import tempfile
from pathlib import Path

SMARTPASTE_DIR = Path.home() / ".smartpaste"
SMARTPASTE_DIR.mkdir(parents=True, exist_ok=True)
CONFIG_FILE = SMARTPASTE_DIR / "config.json"
LOG_FILE = SMARTPASTE_DIR / "smartpaste.log"
LOG_LEVEL = os.getenv("SMARTPASTE_LOG_LEVEL", "INFO")

SCRATCH_PREFIX = "smartpaste_"
SCRATCH_SUFFIX = ".png"
DEFAULT_SCRATCH_DIR = Path(tempfile.gettempdir())
SCRATCH_POLICIES = ("keep", "bounded", "on_exit")
DEFAULT_SCRATCH_POLICY = "bounded"
DEFAULT_SCRATCH_LIMIT = 50

DEFAULT_FALLBACK_MANAGERS = ["wezterm", "kitty"]
DEFAULT_COMMAND_TIMEOUT = 2.0

TMUX_BUFFER_NAME = "smartpaste"

# Clipboard MIME targets, in the order they are tried within a representation
FILE_TARGETS = ["x-special/gnome-copied-files", "text/uri-list"]
IMAGE_TARGETS = [
    "image/png",
    "image/tiff",
    "image/bmp",
    "image/x-ms-bmp",
    "image/jpeg",
    "image/jpg",
    "image/webp",
]
TEXT_TARGETS = [
    "text/plain;charset=utf-8",
    "UTF8_STRING",
    "text/plain",
    "STRING",
    "TEXT",
]
