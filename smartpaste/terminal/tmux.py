"""tmux integration: the session's windows and pane input."""

import logging
import shutil
import subprocess

from smartpaste.config import TMUX_BUFFER_NAME
from smartpaste.errors import NoTabSelected, TerminalPanelNotFound, TerminalWriteError
from smartpaste.terminal.base import Tab
from smartpaste.terminal.workspace import Workspace
from smartpaste.utils import run_checked, run_command, run_text

logger = logging.getLogger("smartpaste")

WINDOW_FORMAT = "#{window_active}\t#{window_index}\t#{window_name}\t#{pane_id}\t#{pane_dead}"


class TmuxPaneSink:
    """Writes into a pane through a tmux paste buffer, without pressing Enter."""

    def __init__(self, pane_id: str):
        self.pane_id = pane_id

    def write(self, text: str) -> None:
        try:
            run_checked(["tmux", "load-buffer", "-b", TMUX_BUFFER_NAME, "-"], input=text.encode("utf-8"))
            # -p: bracketed paste if the shell asked for it, -r: keep LF as is
            run_checked(["tmux", "paste-buffer", "-p", "-r", "-d", "-b", TMUX_BUFFER_NAME, "-t", self.pane_id])
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
            raise TerminalWriteError(f"Error sending to tmux pane {self.pane_id}: {e}") from e

    def describe(self) -> str:
        return f"tmux pane {self.pane_id}"

    def __repr__(self):
        return f"TmuxPaneSink(pane_id={self.pane_id!r})"


class TmuxPanel:
    """Window list of one tmux session."""

    def __init__(self, session: str):
        self.session = session

    @property
    def target(self) -> str:
        return f"={self.session}"

    @classmethod
    def find(cls, workspace: Workspace) -> "TmuxPanel":
        if not shutil.which("tmux"):
            raise TerminalPanelNotFound("tmux is not installed")
        if run_command(["tmux", "has-session", "-t", f"={workspace.session}"]) is None:
            raise TerminalPanelNotFound(
                f"tmux session '{workspace.session}' not found. Please start it first."
            )
        return cls(workspace.session)

    def windows(self) -> list[Tab]:
        output = run_text(["tmux", "list-windows", "-t", self.target, "-F", WINDOW_FORMAT])
        tabs = []
        for line in (output or "").splitlines():
            parts = line.split("\t")
            if len(parts) < 5:
                continue
            active, index, name, pane_id, pane_dead = parts[:5]
            tabs.append(Tab(
                index=index,
                name=name,
                pane_id=pane_id or None,
                pane_dead=pane_dead == "1",
                active=active == "1",
            ))
        return tabs

    def selected_tab(self) -> Tab:
        active = [tab for tab in self.windows() if tab.active]
        if not active:
            raise NoTabSelected()
        return active[0]

    def input_sink(self, tab: Tab) -> TmuxPaneSink | None:
        """Sink for the tab's active pane, or None when the pane cannot take input."""
        if not tab.pane_id or tab.pane_dead:
            logger.debug("Window %s:%s has no live pane", self.session, tab.index)
            return None
        return TmuxPaneSink(tab.pane_id)

    def fallback_handles(self) -> list:
        """Always empty.

        Emulator tabs only reach a tmux pane through the tmux client, so text
        typed into them would land in the same pane that refused it.
        """
        return []

    def describe_tab(self, tab: Tab) -> str:
        if not tab.pane_id:
            return f"tmux window {self.session}:{tab.index} '{tab.name}' without a pane"
        state = " (dead)" if tab.pane_dead else ""
        return f"tmux pane {tab.pane_id}{state} in window {self.session}:{tab.index} '{tab.name}'"
