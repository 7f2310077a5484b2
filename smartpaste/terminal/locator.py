"""Find the terminal input for the selected tab and write into it.

Inside tmux, the active pane of the selected window is written directly.
A pane that cannot take input (dead, gone) is an error: typing into the
emulator tab that shows it would only reach the same pane.

Outside tmux, the terminal emulator's tab list is used instead, and the
text is typed into the tab handle matching the selected tab, in this order:

1. the handle contains the selected tab's pane;
2. the handle's title contains the tab name. This is a guess: a tab
   called "vi" matches a tab titled "review";
3. the handle is the only candidate.

With several candidates and no match the paste is refused, since typing
into the wrong terminal has real side effects.
"""

import logging

from smartpaste.errors import AmbiguousFallbackTarget, TerminalHandleUnavailable
from smartpaste.terminal.base import SupportsPaneBinding, SupportsSendText, Tab
from smartpaste.terminal.managers import EmulatorPanel
from smartpaste.terminal.tmux import TmuxPanel
from smartpaste.terminal.workspace import Workspace

logger = logging.getLogger("smartpaste")


def find_fallback_target(tab: Tab, handles: list) -> SupportsSendText | None:
    """Pick the tab handle showing `tab`, or None if there are no candidates.

    A handle's title is its str().
    """
    candidates = [h for h in handles if isinstance(h, SupportsSendText)]
    if not candidates:
        return None

    for handle in candidates:
        if isinstance(handle, SupportsPaneBinding) and handle.bound_to(tab):
            logger.debug("Matched %r by pane", handle)
            return handle

    if tab.name:
        for handle in candidates:
            if tab.name in str(handle):
                logger.warning("Matched %r by tab name '%s' only", handle, tab.name)
                return handle

    if len(candidates) == 1:
        logger.debug("Using the only terminal tab candidate %r", candidates[0])
        return candidates[0]

    raise AmbiguousFallbackTarget(
        f"{len(candidates)} terminal tabs could receive the paste and none matches tab '{tab.name}'"
    )


def find_panel(workspace: Workspace):
    if workspace.in_tmux:
        return TmuxPanel.find(workspace)
    return EmulatorPanel.find(workspace)


def send_to_terminal(workspace: Workspace, text: str) -> str:
    """Write `text` into the selected tab of the workspace, without a newline.

    Returns a description of where the text went.
    """
    panel = find_panel(workspace)
    tab = panel.selected_tab()

    sink = panel.input_sink(tab)
    if sink is not None:
        sink.write(text)
        logger.info("Pasted %d characters into %s", len(text), sink.describe())
        return sink.describe()

    handles = panel.fallback_handles()
    handle = find_fallback_target(tab, handles)
    if handle is not None:
        handle.send_text(text)
        logger.info("Pasted %d characters into %r", len(text), handle)
        return repr(handle)

    handle_types = sorted({type(h).__name__ for h in handles}) or ["none"]
    raise TerminalHandleUnavailable(
        f"Could not get a writable terminal (got {panel.describe_tab(tab)}; "
        f"fallback handles: {', '.join(handle_types)}). "
        "Restart the pane, or enable remote control in your terminal emulator "
        "and check 'fallback_managers' in the config."
    )
