"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from realty.config import Settings


def test_defaults_are_development():
    settings = Settings(_env_file=None)
    assert settings.is_development
    assert not settings.is_production
    assert settings.geocoding_timeout_seconds > 0


def test_empty_secret_is_rejected():
    with pytest.raises(ValidationError, match="JWT_SECRET must be set"):
        Settings(_env_file=None, jwt_secret="")


def test_production_requires_real_secret():
    with pytest.raises(ValidationError, match="JWT_SECRET must be changed"):
        Settings(
            _env_file=None,
            environment="production",
            database_url="postgresql://u:p@db.internal/realty",
        )


def test_production_rejects_localhost_database():
    with pytest.raises(ValidationError, match="localhost"):
        Settings(
            _env_file=None,
            environment="production",
            jwt_secret="s3cret-value",
            database_url="postgresql://u:p@localhost:5432/realty",
        )


def test_production_settings():
    settings = Settings(
        _env_file=None,
        environment="production",
        jwt_secret="s3cret-value",
        database_url="postgresql://u:p@db.internal/realty",
    )
    assert settings.is_production


def test_settings_are_immutable():
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.jwt_secret = "changed"
