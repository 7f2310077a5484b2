"""MCP tools for Smart Paste."""

from . import paste_tools  # noqa: F401
