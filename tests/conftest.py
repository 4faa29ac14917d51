"""Shared fixtures for appforge tests."""

import pytest

from appforge.config import get_settings
from appforge.execution import ExecutionEngine, SimulatedBackend
from appforge.sessions import InMemorySessionStore, SessionManager


@pytest.fixture(autouse=True)
def appforge_env(monkeypatch):
    """Zero latency, quiet logs and a fresh settings cache for every test."""
    monkeypatch.setenv("APPFORGE_COMMAND_DELAY_MS", "0")
    monkeypatch.setenv("APPFORGE_FILE_DELAY_MS", "0")
    monkeypatch.setenv("APPFORGE_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("APPFORGE_SESSION_STORE", "memory")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def session_manager():
    return SessionManager(InMemorySessionStore(), "/private/tmp/term-users/")


@pytest.fixture
def engine():
    return ExecutionEngine(SimulatedBackend(command_delay=0, file_delay=0))
