from __future__ import annotations

import pytest

from lawnboss.core.config import _build_config
from lawnboss.core.exceptions import ConfigurationError


def test_development_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("INVOICE_DUE_DAYS", raising=False)
    monkeypatch.delenv("PUBLIC_SITE_URL", raising=False)
    config = _build_config("development")

    assert config.DATABASE_URL.startswith("sqlite")
    assert config.INVOICE_DUE_DAYS == 30
    assert config.PUBLIC_SITE_URL == "http://localhost:5173"
    assert config.is_production is False


def test_email_configured_requires_key_and_sender(monkeypatch):
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.test")
    monkeypatch.setenv("SENDGRID_FROM_EMAIL", "billing@example.com")
    assert _build_config("development").email_configured is True

    monkeypatch.setenv("SENDGRID_API_KEY", "  ")
    assert _build_config("development").email_configured is False


def test_production_rejects_sqlite(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./prod.db")
    with pytest.raises(ConfigurationError, match="must not use SQLite"):
        _build_config("production")


def test_rejects_unknown_database_scheme(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mysql://user:pw@localhost/lawnboss")
    with pytest.raises(ConfigurationError):
        _build_config("development")


def test_rejects_negative_due_days(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("INVOICE_DUE_DAYS", "-1")
    with pytest.raises(ConfigurationError, match="INVOICE_DUE_DAYS"):
        _build_config("development")
