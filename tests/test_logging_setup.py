import logging

import pytest

from smartpaste import logging_setup
from smartpaste.logging_setup import setup_logging


@pytest.fixture
def bare_logger(tmp_path, monkeypatch):
    """The smartpaste logger without handlers, logging to a temp file."""
    logger = logging_setup.logger
    saved = logger.handlers[:], logger.level
    logger.handlers.clear()
    monkeypatch.setattr(logging_setup, "LOG_FILE", tmp_path / "smartpaste.log")
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:], logger.level = saved


def test_file_and_console(bare_logger):
    setup_logging("debug")
    assert [type(h) for h in bare_logger.handlers] == [logging.FileHandler, logging.StreamHandler]
    assert bare_logger.level == logging.DEBUG


def test_without_console_only_the_file_is_written(bare_logger, tmp_path):
    setup_logging(console=False)
    bare_logger.error("Smart Paste Error: no session")

    assert [type(h) for h in bare_logger.handlers] == [logging.FileHandler]
    bare_logger.handlers[0].flush()
    assert "no session" in (tmp_path / "smartpaste.log").read_text()


def test_second_call_only_changes_level(bare_logger):
    setup_logging("info")
    setup_logging("warning")
    assert len(bare_logger.handlers) == 2
    assert all(h.level == logging.WARNING for h in bare_logger.handlers)


def test_unwritable_log_file_is_reported(bare_logger, tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(logging_setup, "LOG_FILE", tmp_path)

    setup_logging()

    assert [type(h) for h in bare_logger.handlers] == [logging.StreamHandler]
    assert "unavailable" in caplog.text
