"""
Shared pytest fixtures.

Environment is set before any project import: Log configures itself at
import time and widgets need a platform plugin that works headless.
"""
import os
import sys
import tempfile
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("PROJECTBOARD_LOG_TO_FILE", "0")
os.environ.setdefault("PROJECTBOARD_HOME", tempfile.mkdtemp(prefix="projectboard-tests-"))

# Project root on path so src/ and ui/ import without installation
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from src.application.events import EventBus
from src.features.projects.application.project_store import ProjectStore


@pytest.fixture
def qapp():
    """Ensure QApplication exists for widgets and drag events."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def id_factory():
    """Deterministic ids: p1, p2, ..."""
    counter = {"n": 0}

    def next_id():
        counter["n"] += 1
        return f"p{counter['n']}"

    return next_id


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def store(event_bus, id_factory):
    return ProjectStore(event_bus=event_bus, id_factory=id_factory)


@pytest.fixture
def settings_file(tmp_path):
    return str(tmp_path / "settings.json")
