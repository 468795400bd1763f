from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest

from minimal_api.app.core.config import ConfigurationError, Settings
from minimal_api.app.core.security import TokenService
from minimal_api.app.main import create_app

from .conftest import SECRET

ADMIN = SimpleNamespace(email="adm@example.com", profile="Admin")


def test_issue_and_validate_round_trip():
    service = TokenService(Settings(jwt_secret=SECRET))
    claims = service.validate(service.issue(ADMIN))
    assert claims["email"] == "adm@example.com"
    assert claims["profile"] == "Admin"
    assert claims["role"] == "Admin"
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_expired_token_is_rejected():
    service = TokenService(Settings(jwt_secret=SECRET))
    token = service.issue(ADMIN, now=datetime.now(timezone.utc) - timedelta(hours=25))
    with pytest.raises(jwt.ExpiredSignatureError):
        service.validate(token)


def test_token_signed_with_other_secret_is_rejected():
    token = TokenService(Settings(jwt_secret="another-secret-of-sufficient-length")).issue(ADMIN)
    with pytest.raises(jwt.InvalidTokenError):
        TokenService(Settings(jwt_secret=SECRET)).validate(token)


@pytest.mark.parametrize("secret", ["", "   "])
def test_missing_secret_is_fatal(secret):
    with pytest.raises(ConfigurationError):
        TokenService(Settings(jwt_secret=secret))
    with pytest.raises(ConfigurationError):
        create_app(Settings(jwt_secret=secret, database_url="sqlite://"))


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "s3cret")
    monkeypatch.setenv("PAGE_SIZE", "5")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings.from_env()
    assert settings.jwt_secret == "s3cret"
    assert settings.page_size == 5
    assert settings.access_token_expire_minutes == 1440
    assert settings.database_url == "sqlite:///minimal_api.db"


def test_settings_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "ten")
    with pytest.raises(ConfigurationError):
        Settings.from_env()
