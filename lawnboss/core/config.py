"""Configuration module for the LawnBoss application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from lawnboss.core.exceptions import ConfigurationError

load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_optional(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    DB_CONNECTIVITY_REQUIRED: bool
    SENDGRID_API_KEY: str | None
    SENDGRID_FROM_EMAIL: str | None
    SENDGRID_FROM_NAME: str
    SENDGRID_API_URL: str
    SENDGRID_TIMEOUT_SECONDS: int
    PUBLIC_SITE_URL: str
    COMPANY_NAME: str
    COMPANY_TAGLINE: str
    COMPANY_ADDRESS: str
    COMPANY_PHONE: str
    COMPANY_EMAIL: str
    INVOICE_DUE_DAYS: int
    API_HOST: str
    API_PORT: int
    API_PREFIX: str
    FUNCTIONS_PREFIX: str
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"

    @property
    def email_configured(self) -> bool:
        return bool(self.SENDGRID_API_KEY and self.SENDGRID_FROM_EMAIL)


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=(resolved_env != "production"))

    config = Config(
        APP_NAME="LawnBoss",
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./lawnboss.db"),
        DB_CONNECTIVITY_REQUIRED=_as_bool(
            os.getenv("DB_CONNECTIVITY_REQUIRED"), default=(resolved_env == "production")
        ),
        SENDGRID_API_KEY=_as_optional(os.getenv("SENDGRID_API_KEY")),
        SENDGRID_FROM_EMAIL=_as_optional(os.getenv("SENDGRID_FROM_EMAIL", "estimates@lawnboss.sendgrid.net")),
        SENDGRID_FROM_NAME=os.getenv("SENDGRID_FROM_NAME", "LawnBoss"),
        SENDGRID_API_URL=os.getenv("SENDGRID_API_URL", "https://api.sendgrid.com/v3/mail/send"),
        SENDGRID_TIMEOUT_SECONDS=int(os.getenv("SENDGRID_TIMEOUT_SECONDS", "30")),
        PUBLIC_SITE_URL=os.getenv("PUBLIC_SITE_URL", "http://localhost:5173").rstrip("/"),
        COMPANY_NAME=os.getenv("COMPANY_NAME", "LawnBoss"),
        COMPANY_TAGLINE=os.getenv("COMPANY_TAGLINE", "Professional Lawn Care Services"),
        COMPANY_ADDRESS=os.getenv("COMPANY_ADDRESS", "123 Main St, City, State 12345"),
        COMPANY_PHONE=os.getenv("COMPANY_PHONE", "(555) 123-4567"),
        COMPANY_EMAIL=os.getenv("COMPANY_EMAIL", "info@lawnboss.com"),
        INVOICE_DUE_DAYS=int(os.getenv("INVOICE_DUE_DAYS", "30")),
        API_HOST=os.getenv("API_HOST", "0.0.0.0"),
        API_PORT=int(os.getenv("API_PORT", "8000")),
        API_PREFIX=os.getenv("API_PREFIX", "/api/v1"),
        FUNCTIONS_PREFIX=os.getenv("FUNCTIONS_PREFIX", "/functions/v1"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "postgresql", "postgresql+psycopg2"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)

    if config.SENDGRID_TIMEOUT_SECONDS < 1:
        raise ConfigurationError("SENDGRID_TIMEOUT_SECONDS must be >= 1.")
    if config.INVOICE_DUE_DAYS < 0:
        raise ConfigurationError("INVOICE_DUE_DAYS must be >= 0.")
    if not config.API_PREFIX.startswith("/") or not config.FUNCTIONS_PREFIX.startswith("/"):
        raise ConfigurationError("API_PREFIX and FUNCTIONS_PREFIX must start with '/'.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.is_production and config.DATABASE_URL.startswith("sqlite"):
        raise ConfigurationError("Production DATABASE_URL must not use SQLite.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
