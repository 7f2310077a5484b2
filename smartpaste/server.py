#!/usr/bin/env python
"""Smart Paste MCP Server - clipboard to terminal paste as an MCP tool."""

import os
import platform

if platform.system() == "Darwin":
    homebrew_paths = ["/opt/homebrew/bin", "/usr/local/bin"]
    current_path = os.environ.get("PATH", "")
    paths_to_add = [p for p in homebrew_paths if p not in current_path]
    if paths_to_add:
        os.environ["PATH"] = ":".join(paths_to_add) + ":" + current_path

from fastmcp import FastMCP

mcp = FastMCP("smartpaste")

from . import tools  # noqa: E402,F401


def main():
    """Run the Smart Paste MCP server."""
    from .logging_setup import setup_logging
    from . import __version__

    logger = setup_logging()
    logger.info(f"Starting Smart Paste v{__version__}")

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
