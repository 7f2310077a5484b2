from pathlib import Path

import pytest

from smartpaste import action
from smartpaste.action import smart_paste
from smartpaste.clipboard import Representation, StaticSnapshot
from smartpaste.errors import NoActiveSession, TerminalPanelNotFound
from smartpaste.scratch import ScratchDir
from smartpaste.terminal.workspace import Workspace


@pytest.fixture
def terminal(monkeypatch):
    """Record terminal writes instead of talking to tmux."""
    written = []

    def send_to_terminal(workspace, text):
        written.append((workspace, text))
        return "tmux pane %4"

    monkeypatch.setattr(action, "resolve_workspace", lambda session=None: Workspace(session or "main"))
    monkeypatch.setattr(action, "send_to_terminal", send_to_terminal)
    return written


@pytest.fixture
def reports(monkeypatch):
    reported = []
    monkeypatch.setattr(action, "report_failure", lambda kind, message: reported.append(kind))
    return reported


def test_text_round_trip(terminal, reports):
    result = smart_paste(snapshot=StaticSnapshot({Representation.TEXT: "hello world"}))

    assert result.ok
    assert result.payload == "hello world"
    assert result.target == "tmux pane %4"
    assert terminal == [(Workspace("main"), "hello world")]
    assert reports == []


def test_two_files(terminal, reports):
    snapshot = StaticSnapshot({Representation.FILE_LIST: [Path("/a/b c.txt"), Path("/a/d.txt")]})
    result = smart_paste(session="work", snapshot=snapshot)

    assert terminal == [(Workspace("work"), '"/a/b c.txt" /a/d.txt')]
    assert result.ok


def test_unsupported_content_writes_nothing(terminal, reports):
    class OnlyRawTypes(StaticSnapshot):
        def is_empty(self):
            return False

    result = smart_paste(snapshot=OnlyRawTypes())

    assert not result.ok
    assert result.kind == "UnsupportedClipboardContent"
    assert terminal == []
    assert reports == ["UnsupportedClipboardContent"]


def test_no_session_is_checked_first(monkeypatch, reports):
    def no_session(session=None):
        raise NoActiveSession()

    monkeypatch.setattr(action, "resolve_workspace", no_session)
    monkeypatch.setattr(action, "get_snapshot", lambda: pytest.fail("clipboard read"))

    result = smart_paste()

    assert result.kind == "NoActiveSession"
    assert reports == ["NoActiveSession"]


def test_terminal_failure_keeps_payload(terminal, reports, monkeypatch):
    def fail(workspace, text):
        raise TerminalPanelNotFound()

    monkeypatch.setattr(action, "send_to_terminal", fail)
    result = smart_paste(snapshot=StaticSnapshot({Representation.TEXT: "ls"}))

    assert not result.ok
    assert result.kind == "TerminalPanelNotFound"
    assert result.payload == "ls"


def test_unexpected_error_is_reported(terminal, reports, monkeypatch):
    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(action, "get_snapshot", boom)
    result = smart_paste()

    assert result.kind == "InternalError"
    assert "boom" in result.message


def test_dry_run_does_not_write(terminal, reports, scratch_dir, rgb_image):
    scratch = ScratchDir(scratch_dir, policy="keep")
    result = smart_paste(snapshot=StaticSnapshot({Representation.IMAGE: rgb_image}), scratch=scratch, dry_run=True)

    assert result.ok
    assert Path(result.payload).exists()
    assert terminal == []
