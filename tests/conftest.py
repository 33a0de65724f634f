"""Shared pytest fixtures for StandTimer tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from standtimer.storage import MemoryStore, configure_engine, init_db
from standtimer.timer.engine import TimerEngine

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def engine(store):
    """Ten-minute countdown, two-minute pre-alert, auto-restart off."""
    return TimerEngine(600, 120, store=store)


@pytest.fixture
def engine_auto(store):
    """Same as ``engine`` with auto-restart after 60 s of overtime."""
    return TimerEngine(600, 120, 60, store=store)


@pytest.fixture
def clock():
    return FakeClock(1_700_000_000.0)
