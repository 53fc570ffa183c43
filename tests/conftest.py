"""Shared pytest fixtures for High-Low tests."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from highlow.cards import Deck
from tests.helpers.recording import RecordingDelegate
from ui.tracker import CardGameTracker


@pytest.fixture
def seeded_deck():
    """Provide a reproducible deck."""
    return Deck(seed=42)


@pytest.fixture
def recorder():
    """Provide a recording delegate."""
    return RecordingDelegate()


@pytest.fixture
def output():
    """Capture buffer for console output."""
    return io.StringIO()


@pytest.fixture
def tracker(output):
    """Tracker printing plain text into the capture buffer."""
    console = Console(file=output, width=200, color_system=None, force_terminal=False)
    return CardGameTracker(console)


@pytest.fixture
def restore_root_logging():
    """Undo setup_logging: drop its rich handlers, restore level and other handlers."""
    root = logging.getLogger()
    handlers = [h for h in root.handlers if type(h).__module__ != "_pytest.logging"]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler) and handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
