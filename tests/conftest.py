import os

import pytest
from PIL import Image

import smartpaste.config.settings as settings
from smartpaste.terminal.managers import reset_manager_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """No user config file, no SMARTPASTE_* env vars, no notifications."""
    monkeypatch.setattr(settings, "CONFIG_FILE", tmp_path / "config.json")
    for key in list(os.environ):
        if key.startswith("SMARTPASTE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("SMARTPASTE_NOTIFY", "false")
    reset_manager_cache()
    yield tmp_path / "config.json"
    reset_manager_cache()


@pytest.fixture
def scratch_dir(tmp_path):
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def rgb_image():
    return Image.new("RGB", (4, 3), (255, 0, 0))
