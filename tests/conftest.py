"""Shared pytest fixtures."""

import tempfile
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_feedboat_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/feedboat directory."""
    feedboat_dir = temp_dir / ".feedboat"
    feedboat_dir.mkdir()
    monkeypatch.setenv("FEEDBOAT_DIR", str(feedboat_dir))
    return feedboat_dir


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real config dir and debug log."""
    from feedboat.utils.debug import reload_config

    for var in ("FEEDBOAT_DEBUG", "FEEDBOAT_CYCLE_NEXT_KEY", "FEEDBOAT_CYCLE_PREVIOUS_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("FEEDBOAT_DIR", str(tmp_path / "feedboat-home"))
    reload_config()
    yield
    reload_config()


@pytest.fixture
def recording_console(monkeypatch):
    """A Rich console that writes terminal codes into a buffer."""
    # Rich drops control codes on dumb terminals
    monkeypatch.setenv("TERM", "xterm-256color")
    return Console(
        file=StringIO(),
        force_terminal=True,
        width=40,
        height=10,
        color_system=None,
        highlight=False,
    )
