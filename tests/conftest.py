"""Pytest configuration and fixtures for the Reminders MCP server tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from helpers import FakeExecutor  # noqa: E402

from reminders_mcp.store import ReminderStore  # noqa: E402


@pytest.fixture
def fake_executor() -> FakeExecutor:
    """Provide a fresh fake executor."""
    return FakeExecutor()


@pytest.fixture
def store(fake_executor: FakeExecutor, monkeypatch: pytest.MonkeyPatch) -> ReminderStore:
    """Install a ReminderStore singleton backed by the fake executor."""
    instance = ReminderStore(executor=fake_executor, timeout=12.5)
    monkeypatch.setattr(ReminderStore, "_instance", instance)
    return instance
