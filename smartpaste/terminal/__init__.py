"""Terminal targets for Smart Paste."""

from .base import Tab, TerminalSink, SupportsSendText, SupportsPaneBinding
from .managers import (
    MANAGERS,
    WeztermManager,
    KittyManager,
    WeztermTab,
    KittyTab,
    EmulatorPanel,
    available_managers,
    reset_manager_cache,
    fallback_tabs,
)
from .workspace import Workspace, resolve_workspace
from .tmux import TmuxPanel, TmuxPaneSink
from .locator import find_fallback_target, find_panel, send_to_terminal

__all__ = [
    "Tab",
    "TerminalSink",
    "SupportsSendText",
    "SupportsPaneBinding",
    "Workspace",
    "TmuxPanel",
    "TmuxPaneSink",
    "resolve_workspace",
    "MANAGERS",
    "WeztermManager",
    "KittyManager",
    "WeztermTab",
    "KittyTab",
    "EmulatorPanel",
    "available_managers",
    "reset_manager_cache",
    "fallback_tabs",
    "find_fallback_target",
    "find_panel",
    "send_to_terminal",
]
