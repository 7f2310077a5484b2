import subprocess

import pytest

from smartpaste.errors import NoTabSelected, TerminalPanelNotFound, TerminalWriteError
from smartpaste.terminal import tmux
from smartpaste.terminal.tmux import TmuxPaneSink, TmuxPanel
from smartpaste.terminal.workspace import Workspace

WINDOWS = "0\t0\teditor\t%1\t0\n1\t1\tshell\t%4\t0\n0\t2\tlogs\t%7\t1\n"


@pytest.fixture
def fake_tmux(monkeypatch):
    """Answer tmux queries from canned output and record writes."""
    outputs = {"list-windows": WINDOWS}
    writes = []

    def run_text(command, timeout=None):
        return outputs.get(command[1])

    def run_command(command, input=None, timeout=None):
        return b"" if command[1] == "has-session" and command[3] == "=main" else None

    def run_checked(command, input=None, timeout=None):
        writes.append((command, input))
        return b""

    monkeypatch.setattr(tmux, "run_text", run_text)
    monkeypatch.setattr(tmux, "run_command", run_command)
    monkeypatch.setattr(tmux, "run_checked", run_checked)
    monkeypatch.setattr(tmux.shutil, "which", lambda name: f"/usr/bin/{name}")
    return outputs, writes


class TestTmuxPanel:

    def test_find(self, fake_tmux):
        assert TmuxPanel.find(Workspace("main")).session == "main"

    def test_missing_session(self, fake_tmux):
        with pytest.raises(TerminalPanelNotFound):
            TmuxPanel.find(Workspace("other"))

    def test_tmux_not_installed(self, monkeypatch):
        monkeypatch.setattr(tmux.shutil, "which", lambda name: None)
        with pytest.raises(TerminalPanelNotFound):
            TmuxPanel.find(Workspace("main"))

    def test_windows(self, fake_tmux):
        windows = TmuxPanel("main").windows()
        assert [(w.index, w.name, w.pane_id, w.pane_dead, w.active) for w in windows] == [
            ("0", "editor", "%1", False, False),
            ("1", "shell", "%4", False, True),
            ("2", "logs", "%7", True, False),
        ]

    def test_selected_tab_is_active_window(self, fake_tmux):
        tab = TmuxPanel("main").selected_tab()
        assert (tab.index, tab.name, tab.pane_id) == ("1", "shell", "%4")

    def test_no_active_window(self, fake_tmux):
        outputs, _ = fake_tmux
        outputs["list-windows"] = "0\t0\teditor\t%1\t0\n"
        with pytest.raises(NoTabSelected):
            TmuxPanel("main").selected_tab()

    def test_input_sink_for_live_pane(self, fake_tmux):
        panel = TmuxPanel("main")
        sink = panel.input_sink(panel.selected_tab())
        assert isinstance(sink, TmuxPaneSink)
        assert sink.pane_id == "%4"

    def test_no_input_sink_for_dead_pane(self, fake_tmux):
        panel = TmuxPanel("main")
        dead = panel.windows()[2]
        assert panel.input_sink(dead) is None

    def test_dead_pane_has_no_fallback(self, fake_tmux):
        panel = TmuxPanel("main")
        dead = panel.windows()[2]
        assert panel.fallback_handles() == []
        assert panel.describe_tab(dead) == "tmux pane %7 (dead) in window main:2 'logs'"


class TestTmuxPaneSink:

    def test_write_is_exact_and_not_executed(self, fake_tmux):
        _, writes = fake_tmux
        TmuxPaneSink("%4").write("hello world")

        (load, data), (paste, _) = writes
        assert load[:2] == ["tmux", "load-buffer"]
        assert data == b"hello world"
        assert paste[:2] == ["tmux", "paste-buffer"]
        assert "-r" in paste and paste[-2:] == ["-t", "%4"]

    def test_write_failure(self, monkeypatch):
        def run_checked(command, input=None, timeout=None):
            raise subprocess.CalledProcessError(1, command)

        monkeypatch.setattr(tmux, "run_checked", run_checked)
        with pytest.raises(TerminalWriteError):
            TmuxPaneSink("%4").write("x")