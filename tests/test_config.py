"""Unit tests for environment-driven settings."""

import pytest

from coded_errors.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CODED_ERRORS_STACK_TRACE_LIMIT", raising=False)
    monkeypatch.delenv("CODED_ERRORS_STACK_TRACE_LIMIT_WRITABLE", raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.stack_trace_limit == 10
    assert settings.stack_trace_limit_writable is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODED_ERRORS_STACK_TRACE_LIMIT", "25")
    monkeypatch.setenv("CODED_ERRORS_STACK_TRACE_LIMIT_WRITABLE", "false")
    monkeypatch.setenv("CODED_ERRORS_IS_WINDOWS", "true")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.stack_trace_limit == 25
    assert settings.stack_trace_limit_writable is False
    assert settings.is_windows is True
