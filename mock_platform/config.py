"""
Configuration Classes for the stand-in automation platform.

The stand-in platform reproduces the pages and API endpoints the suite
touches so the page objects and the API client can be exercised without
the real SaaS.  Configuration follows the usual class hierarchy: the base
``Config`` holds development defaults and subclasses override what differs.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


class Config:
    """
    Base configuration with development-safe defaults.

    Attributes:
        SECRET_KEY: Flask session signing key.
        SQLALCHEMY_DATABASE_URI: Database connection string.
        MOCK_USERNAME: The one account the login page accepts.
        MOCK_PASSWORD: Password for ``MOCK_USERNAME``.
        MOCK_API_TOKEN: Bearer token the REST API accepts.
        MOCK_FAIL_SAVES: When True, form/task bot saves answer 500.
    """

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "mock-platform-dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'mock_platform.db'}",
    )

    MOCK_USERNAME: str = os.environ.get("MOCK_USERNAME", "qa.engineer@example.com")
    MOCK_PASSWORD: str = os.environ.get("MOCK_PASSWORD", "Sup3rSecret!")
    MOCK_API_TOKEN: str = os.environ.get("MOCK_API_TOKEN", "mock-api-token")
    MOCK_FAIL_SAVES: bool = False

    MAX_CONTENT_LENGTH: int = 5 * 1024 * 1024


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """
    Testing environment configuration.

    The suite serves the app from a background thread, so SQLite must
    allow connections from threads other than the creating one.
    """

    DEBUG: bool = False
    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'test_mock_platform.db'}?check_same_thread=False",
    )
    SQLALCHEMY_ENGINE_OPTIONS: dict = {"pool_pre_ping": True}


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name. When None, reads ``FLASK_ENV``.

    Returns:
        Configuration class for the environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "default")
    return config.get(env, config["default"])
