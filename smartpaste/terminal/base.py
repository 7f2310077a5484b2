"""Shared types for terminal targets."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Tab:
    """The selected terminal tab: a tmux window, or an emulator tab outside tmux.

    `pane_id` is the pane that takes input: a tmux pane id (`%4`) or an
    emulator pane key (`wezterm:3`, `kitty:12`).
    """

    index: str
    name: str
    pane_id: str | None = None
    pane_dead: bool = False
    active: bool = False


@runtime_checkable
class TerminalSink(Protocol):
    """Direct input sink: text written here lands on the shell's input line."""

    def write(self, text: str) -> None: ...

    def describe(self) -> str: ...


@runtime_checkable
class SupportsSendText(Protocol):
    """Tab handle from a terminal emulator that can type text into its tab."""

    def send_text(self, text: str) -> None: ...


@runtime_checkable
class SupportsPaneBinding(Protocol):
    """Tab handle that can tell whether it contains the selected tab's pane."""

    def bound_to(self, tab: Tab) -> bool: ...
