"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from pickpanel.utils.debug import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_pickpanel_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/pickpanel directory."""
    pickpanel_dir = temp_dir / ".pickpanel"
    pickpanel_dir.mkdir()
    monkeypatch.setenv("PICKPANEL_DIR", str(pickpanel_dir))
    return pickpanel_dir


@pytest.fixture(autouse=True)
def isolated_config(mock_pickpanel_dir, monkeypatch):
    """Keep every test away from the real config and shell overrides."""
    monkeypatch.delenv("PICKPANEL_DEBUG", raising=False)
    monkeypatch.delenv("PICKPANEL_BORDER_STYLE", raising=False)
    reload_config()
    yield
    reload_config()


@pytest.fixture
def abc_overlay():
    """Overlay with three options and a recording callback."""
    from pickpanel.core import SelectionOverlay

    received = []
    overlay = SelectionOverlay("Pick one", ["A", "B", "C"])
    overlay.set_on_submit(received.append)
    overlay.received = received
    return overlay
