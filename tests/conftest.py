"""Shared pytest fixtures."""

import pytest

from tests.helpers.fake_terminal import FakeTerminal


@pytest.fixture
def mock_xattach_dir(tmp_path, monkeypatch):
    """Set up a mock ~/.config/xattach directory."""
    xattach_dir = tmp_path / ".xattach"
    xattach_dir.mkdir()
    monkeypatch.setenv("XATTACH_DIR", str(xattach_dir))
    return xattach_dir


@pytest.fixture(autouse=True)
def _isolate_config(mock_xattach_dir, monkeypatch):
    """Keep tests away from the real config and reset the debug cache."""
    from xattach.utils import debug

    for key in ("XATTACH_DEBUG", "XATTACH_XRANDR_COMMAND"):
        monkeypatch.delenv(key, raising=False)
    debug.reload_config()
    yield
    debug.reload_config()


@pytest.fixture
def fake_terminal():
    """Factory for FakeTerminal with scripted keys."""

    def make(*keys, **kwargs):
        return FakeTerminal(keys=keys, **kwargs)

    return make
