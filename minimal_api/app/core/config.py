"""
Configuration management.

The ``Settings`` dataclass gathers every tunable of the service in one
place.  Values are read from environment variables by
``Settings.from_env`` and the resulting object is handed explicitly to
``create_app``, which passes it on to the token service and the
database layer.  Nothing reads the environment after startup.

The signing secret has no default.  A missing or empty ``JWT_SECRET``
is a fatal misconfiguration: ``require_jwt_secret`` raises
``ConfigurationError`` and the application refuses to start.
"""

import os
from dataclasses import dataclass
from typing import Optional


class ConfigurationError(RuntimeError):
    """Raised when the service cannot start with the given settings."""


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass
class Settings:
    """Application settings."""

    project_name: str = "Minimal API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    # Tokens are valid for one day.
    access_token_expire_minutes: int = 60 * 24
    database_url: str = "sqlite:///minimal_api.db"
    page_size: int = 10

    # Optional first administrator created on startup when the
    # administrators table is empty.  Both email and password must be set.
    bootstrap_admin_email: str = ""
    bootstrap_admin_password: str = ""
    bootstrap_admin_profile: str = "Admin"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Unset variables fall back to the dataclass defaults, except for
        ``JWT_SECRET`` which stays empty and is rejected later by
        ``require_jwt_secret``.
        """
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=os.getenv("LOG_FILE") or None,
            jwt_secret=os.getenv("JWT_SECRET", ""),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", cls.jwt_algorithm),
            access_token_expire_minutes=_env_int(
                "ACCESS_TOKEN_EXPIRE_MINUTES", cls.access_token_expire_minutes
            ),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            page_size=_env_int("PAGE_SIZE", cls.page_size),
            bootstrap_admin_email=os.getenv("BOOTSTRAP_ADMIN_EMAIL", ""),
            bootstrap_admin_password=os.getenv("BOOTSTRAP_ADMIN_PASSWORD", ""),
            bootstrap_admin_profile=os.getenv("BOOTSTRAP_ADMIN_PROFILE", cls.bootstrap_admin_profile),
        )

    def require_jwt_secret(self) -> str:
        """Return the signing secret or fail if it is not configured."""
        secret = (self.jwt_secret or "").strip()
        if not secret:
            raise ConfigurationError("JWT_SECRET is not set; refusing to start without a signing secret")
        return secret
