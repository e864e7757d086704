from __future__ import annotations

import pytest

from guard_clauses import GuardViolation
from guard_http.config import Settings


def _clear(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GUARD_LOG_LEVEL", "GUARD_STATUS_CODE", "GUARD_EXPOSE_MESSAGES"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear(monkeypatch)
    settings = Settings.from_env()
    assert settings == Settings(log_level="INFO", status_code=400, expose_messages=True)


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("GUARD_LOG_LEVEL", " debug ")
    monkeypatch.setenv("GUARD_STATUS_CODE", "422")
    monkeypatch.setenv("GUARD_EXPOSE_MESSAGES", "OFF")
    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.status_code == 422
    assert settings.expose_messages is False


@pytest.mark.parametrize("raw", ["1", "TRUE", "yes", "On"])
def test_expose_messages_truthy_spellings(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("GUARD_EXPOSE_MESSAGES", raw)
    assert Settings.from_env().expose_messages is True


@pytest.mark.parametrize("raw", ["399", "500", "200"])
def test_status_code_must_be_client_error(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("GUARD_STATUS_CODE", raw)
    expected = f"must be a 4xx status, got {raw}"
    with pytest.raises(GuardViolation, match=expected) as info:
        Settings.from_env()
    assert info.value.label == "GUARD_STATUS_CODE"


def test_status_code_must_be_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("GUARD_STATUS_CODE", "bad")
    with pytest.raises(ValueError, match="invalid literal"):
        Settings.from_env()
