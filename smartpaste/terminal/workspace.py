"""Which terminal a paste is aimed at."""

import logging
import os
from dataclasses import dataclass

from smartpaste.config import get_session
from smartpaste.errors import NoActiveSession
from smartpaste.terminal.managers import available_managers
from smartpaste.utils import run_text

logger = logging.getLogger("smartpaste")


@dataclass(frozen=True)
class Workspace:
    """A tmux session, or the terminal emulator itself when `session` is None."""

    session: str | None = None

    @property
    def in_tmux(self) -> bool:
        return self.session is not None


def resolve_workspace(session: str | None = None) -> Workspace:
    """Find the active session.

    Tried in order: the explicit argument, the `session` config key, the
    tmux session of $TMUX, then a terminal emulator with remote control
    (WezTerm, kitty) that this process runs in.
    """
    session = session or get_session()
    if session:
        return Workspace(session)

    if os.environ.get("TMUX"):
        name = run_text(["tmux", "display-message", "-p", "#S"])
        if name and name.strip():
            return Workspace(name.strip())

    managers = available_managers()
    if managers:
        logger.debug("No tmux session, using %s", ", ".join(m.name for m in managers))
        return Workspace()

    raise NoActiveSession()
