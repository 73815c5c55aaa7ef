import pytest

from coded_errors import trace
from coded_errors.config import settings
from coded_errors.registry import MessageRegistry
from coded_errors.trace import StackTraceLimit


@pytest.fixture
def registry() -> MessageRegistry:
    """A fresh registry, isolated from the frozen process-wide one."""
    return MessageRegistry()


@pytest.fixture
def frozen_limit(monkeypatch: pytest.MonkeyPatch) -> StackTraceLimit:
    """Stand in for a host whose trace limit cannot be changed."""
    limit = StackTraceLimit(3, writable=False)
    monkeypatch.setattr(trace, "stack_trace_limit", limit)
    return limit


@pytest.fixture
def small_limit(monkeypatch: pytest.MonkeyPatch) -> StackTraceLimit:
    """A writable limit far below the depth of any pytest call chain."""
    limit = StackTraceLimit(2)
    monkeypatch.setattr(trace, "stack_trace_limit", limit)
    return limit


@pytest.fixture
def windows(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "is_windows", True)


@pytest.fixture
def posix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "is_windows", False)
