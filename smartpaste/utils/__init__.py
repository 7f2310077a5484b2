"""Utility functions for Smart Paste."""

from .process import (
    run_command,
    run_text,
    run_checked,
)

__all__ = [
    "run_command",
    "run_text",
    "run_checked",
]
