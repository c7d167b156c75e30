"""Shared pytest fixtures for PomoConfig tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomoconfig.database import SqlConfigStore, create_session_factory
from pomoconfig.timer_config import InMemoryConfigStore, TimerConfigService

from helpers import FakeClock, SequentialIds


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def session_factory():
    """Fresh in-memory SQLite database per test."""
    return create_session_factory("sqlite:///:memory:")


@pytest.fixture
def memory_store(clock, ids):
    return InMemoryConfigStore(clock=clock, id_factory=ids)


@pytest.fixture
def sql_store(session_factory, clock, ids):
    return SqlConfigStore(session_factory, clock=clock, id_factory=ids)


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Every store implementation, one test run each."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def service(store):
    return TimerConfigService(store)
