from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain_registry.core.config import Settings
from domain_registry.core.exceptions import AppError, NotFoundError, UsernameTakenError


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "abc")
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)

    s = Settings(_env_file=None)

    assert s.JWT_SECRET == "abc"
    assert s.JWT_ALGORITHM == "HS256"
    assert s.HOST == "127.0.0.1"
    assert s.PORT == 8000
    assert s.MAX_UPLOAD_BYTES == 1024 * 1024 * 1024


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "abc")
    monkeypatch.setenv("PORT", "9123")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/other.db")

    s = Settings(_env_file=None)

    assert s.PORT == 9123
    assert s.DATABASE_URL == "sqlite:///tmp/other.db"


def test_settings_require_jwt_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_app_error_bodies() -> None:
    assert AppError("disk full").body == "server error, disk full"
    assert AppError("disk full").status_code == 500
    assert NotFoundError("task x not found").body == "task x not found"
    assert UsernameTakenError("alice").status_code == 409
