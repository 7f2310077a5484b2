"""Terminal emulator tab managers, used when no tmux session is in play.

Each manager wraps an emulator's remote-control CLI and hands out tab
handles that can type text into the tab. Which managers exist on this
machine is probed once per process.
"""

import json
import logging
import os
import shutil
import subprocess
from functools import lru_cache

from smartpaste.config import get_fallback_managers
from smartpaste.errors import NoTabSelected, TerminalPanelNotFound, TerminalWriteError
from smartpaste.terminal.base import Tab
from smartpaste.utils import run_checked, run_command

logger = logging.getLogger("smartpaste")


class WeztermTab:
    """Active pane of a WezTerm tab."""

    def __init__(self, pane_id: int, tab_id: int, title: str = "", pane_ids=(), focused: bool = False):
        self.pane_id = pane_id
        self.tab_id = tab_id
        self.title = title
        self.pane_ids = frozenset(pane_ids) | {pane_id}
        self.focused = focused

    @property
    def key(self) -> str:
        return f"wezterm:{self.pane_id}"

    @property
    def pane_keys(self) -> frozenset:
        return frozenset(f"wezterm:{p}" for p in self.pane_ids)

    def send_text(self, text: str) -> None:
        try:
            run_checked(
                ["wezterm", "cli", "send-text", "--pane-id", str(self.pane_id)],
                input=text.encode("utf-8"),
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
            raise TerminalWriteError(f"Error sending to WezTerm pane {self.pane_id}: {e}") from e

    def bound_to(self, tab: Tab) -> bool:
        return tab.pane_id in self.pane_keys

    def __str__(self):
        return self.title

    def __repr__(self):
        return f"WeztermTab(tab={self.tab_id}, pane={self.pane_id}, title={self.title!r})"


class KittyTab:
    """Focused window of a kitty tab."""

    def __init__(self, window_id: int, tab_id: int, title: str = "", window_ids=(), focused: bool = False):
        self.window_id = window_id
        self.tab_id = tab_id
        self.title = title
        self.window_ids = frozenset(window_ids) | {window_id}
        self.focused = focused

    @property
    def key(self) -> str:
        return f"kitty:{self.window_id}"

    @property
    def pane_keys(self) -> frozenset:
        return frozenset(f"kitty:{w}" for w in self.window_ids)

    def send_text(self, text: str) -> None:
        try:
            run_checked(
                ["kitty", "@", "send-text", "--match", f"id:{self.window_id}", "--stdin"],
                input=text.encode("utf-8"),
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
            raise TerminalWriteError(f"Error sending to kitty window {self.window_id}: {e}") from e

    def bound_to(self, tab: Tab) -> bool:
        return tab.pane_id in self.pane_keys

    def __str__(self):
        return self.title

    def __repr__(self):
        return f"KittyTab(tab={self.tab_id}, window={self.window_id}, title={self.title!r})"


def _load_json(output: bytes | None, what: str):
    if not output:
        return None
    try:
        return json.loads(output)
    except ValueError as e:
        logger.debug("Unreadable %s: %s", what, e)
        return None


class WeztermManager:
    name = "wezterm"
    pane_env = "WEZTERM_PANE"

    @classmethod
    def probe(cls) -> bool:
        if not shutil.which("wezterm"):
            return False
        return bool(os.environ.get("WEZTERM_PANE") or os.environ.get("WEZTERM_UNIX_SOCKET"))

    @classmethod
    def current_pane(cls) -> str | None:
        """Key of the pane this process runs in, if any."""
        pane = os.environ.get(cls.pane_env)
        return f"{cls.name}:{pane}" if pane else None

    def tabs(self) -> list[WeztermTab]:
        panes = _load_json(run_command(["wezterm", "cli", "list", "--format", "json"]), "wezterm pane list")
        if not panes:
            return []
        focused_pane = self._focused_pane()

        by_tab: dict[int, list[dict]] = {}
        for pane in panes:
            tab_id = pane.get("tab_id")
            if tab_id is None or pane.get("pane_id") is None:
                continue
            by_tab.setdefault(tab_id, []).append(pane)

        handles = []
        for tab_id, tab_panes in by_tab.items():
            active = next((p for p in tab_panes if p.get("is_active")), tab_panes[0])
            pane_ids = [p["pane_id"] for p in tab_panes]
            handles.append(WeztermTab(
                pane_id=active["pane_id"],
                tab_id=tab_id,
                title=active.get("tab_title") or active.get("title", ""),
                pane_ids=pane_ids,
                focused=focused_pane in pane_ids,
            ))
        return handles

    def _focused_pane(self) -> int | None:
        clients = _load_json(run_command(["wezterm", "cli", "list-clients", "--format", "json"]), "wezterm client list")
        for client in clients or []:
            if client.get("focused_pane_id") is not None:
                return client["focused_pane_id"]
        return None


class KittyManager:
    name = "kitty"
    pane_env = "KITTY_WINDOW_ID"

    @classmethod
    def probe(cls) -> bool:
        if not shutil.which("kitty"):
            return False
        return bool(os.environ.get("KITTY_LISTEN_ON") or os.environ.get("KITTY_WINDOW_ID"))

    @classmethod
    def current_pane(cls) -> str | None:
        """Key of the window this process runs in, if any."""
        window = os.environ.get(cls.pane_env)
        return f"{cls.name}:{window}" if window else None

    def tabs(self) -> list[KittyTab]:
        os_windows = _load_json(run_command(["kitty", "@", "ls"]), "kitty window list")
        if not os_windows:
            return []

        handles = []
        for os_window in os_windows:
            for tab in os_window.get("tabs", []):
                windows = tab.get("windows", [])
                if not windows:
                    continue
                window = next(
                    (w for w in windows if w.get("is_focused") or w.get("is_active")),
                    windows[0],
                )
                handles.append(KittyTab(
                    window_id=window["id"],
                    tab_id=tab["id"],
                    title=tab.get("title") or window.get("title", ""),
                    window_ids=[w["id"] for w in windows if "id" in w],
                    focused=bool(tab.get("is_focused") and os_window.get("is_focused", True)),
                ))
        return handles


MANAGERS = {
    WeztermManager.name: WeztermManager,
    KittyManager.name: KittyManager,
}


@lru_cache(maxsize=None)
def _probe(names: tuple[str, ...]) -> tuple:
    found = []
    for name in names:
        manager_cls = MANAGERS.get(name)
        if manager_cls is None:
            logger.warning("Unknown fallback manager '%s' (known: %s)", name, ", ".join(MANAGERS))
            continue
        if manager_cls.probe():
            logger.debug("Fallback manager available: %s", name)
            found.append(manager_cls())
    return tuple(found)


def available_managers() -> tuple:
    """Fallback managers present on this machine, probed once per configuration."""
    return _probe(tuple(get_fallback_managers()))


def reset_manager_cache():
    _probe.cache_clear()


def fallback_tabs(managers=None) -> list:
    handles = []
    for manager in available_managers() if managers is None else managers:
        handles.extend(manager.tabs())
    return handles


class EmulatorPanel:
    """Tabs of the terminal emulators reachable through remote control.

    Used when the paste is not aimed at a tmux session. The selected tab is
    the one holding the pane this process runs in, else the focused one.
    Emulator tabs have no direct input sink; text goes in through a tab
    handle's send_text.
    """

    def __init__(self, managers):
        self.managers = tuple(managers)
        self._tabs = None

    @classmethod
    def find(cls, workspace=None) -> "EmulatorPanel":
        managers = available_managers()
        if not managers:
            raise TerminalPanelNotFound(
                "No terminal emulator with remote control found "
                f"(tried: {', '.join(get_fallback_managers()) or 'none'})"
            )
        return cls(managers)

    def tabs(self) -> list:
        if self._tabs is None:
            self._tabs = fallback_tabs(self.managers)
        return self._tabs

    def selected_tab(self) -> Tab:
        handles = self.tabs()
        for manager in self.managers:
            current = manager.current_pane()
            for handle in handles:
                if current and current in handle.pane_keys:
                    return self._tab_for(handle, current)

        for handle in handles:
            if handle.focused:
                return self._tab_for(handle, handle.key)
        raise NoTabSelected("No focused terminal tab found")

    @staticmethod
    def _tab_for(handle, pane_key: str) -> Tab:
        return Tab(index=str(handle.tab_id), name=handle.title, pane_id=pane_key, active=True)

    def input_sink(self, tab: Tab) -> None:
        return None

    def fallback_handles(self) -> list:
        return self.tabs()

    def describe_tab(self, tab: Tab) -> str:
        return f"terminal tab '{tab.name}' ({tab.pane_id})"
