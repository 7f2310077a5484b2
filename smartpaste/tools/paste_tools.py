"""Smart Paste MCP tools."""

import logging

from smartpaste.action import smart_paste
from smartpaste.server import mcp

logger = logging.getLogger("smartpaste")


@mcp.tool(name="smart_paste")
def smart_paste_tool(session: str | None = None, dry_run: bool = False) -> str:
    """Paste the clipboard into the active tmux window without running it.

    Screenshots are saved as PNG files and their path is pasted; copied files
    are pasted as a list of paths; text is pasted verbatim.

    Args:
        session: tmux session to paste into (default: configured or current)
        dry_run: resolve the clipboard but do not write anything

    Returns:
        Status message
    """
    result = smart_paste(session=session, dry_run=dry_run)
    if not result.ok:
        return f"❌ {result.kind}: {result.message}"
    if dry_run:
        return f"Would paste: {result.payload}"
    return f"✅ {result.message}"
