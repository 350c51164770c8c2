"""
Shared fixtures for Prompt Architect tests.
"""

import pytest
from unittest.mock import MagicMock

from prompt_architect.services.clipboard import Clipboard
from prompt_architect.services.scheduler import Scheduler


class FakeClipboard(Clipboard):
    def __init__(self):
        self.writes = []

    def write_text(self, text):
        self.writes.append(text)


class FakeScheduler(Scheduler):
    """Manual clock: callbacks run only when advance() passes their due time."""

    def __init__(self):
        self.now = 0.0
        self._next_handle = 0
        self.pending = {}

    def schedule(self, delay_seconds, callback):
        self._next_handle += 1
        self.pending[self._next_handle] = (self.now + delay_seconds, callback)
        return self._next_handle

    def cancel(self, handle):
        self.pending.pop(handle, None)

    def advance(self, seconds):
        self.now += seconds
        due = sorted(
            (when, handle) for handle, (when, _) in self.pending.items() if when <= self.now
        )
        for _, handle in due:
            _, callback = self.pending.pop(handle)
            callback()


@pytest.fixture
def fake_clipboard():
    """Fixture providing a clipboard that records writes."""
    return FakeClipboard()


@pytest.fixture
def fake_scheduler():
    """Fixture providing a manually advanced scheduler."""
    return FakeScheduler()


@pytest.fixture
def mock_enhancer():
    """Fixture providing a mocked PromptEnhancer."""
    enhancer = MagicMock()
    enhancer.enhance.return_value = '{"meta": {"project_name": "Todo"}}'
    return enhancer
