"""
Application configuration.

Flask config classes for development, testing and production. Secrets
and paths come from environment variables so they stay out of the code
and switching environments is a matter of picking a class.
"""

import os
import secrets
import warnings
from datetime import timedelta


def _safe_secret_key() -> str:
    """Return SECRET_KEY from the environment or a random one.

    In production always set SECRET_KEY explicitly, otherwise every
    restart invalidates issued tokens.
    """
    key = os.environ.get("SECRET_KEY", "").strip()
    if not key:
        key = secrets.token_hex(32)
        if os.environ.get("FLASK_ENV") != "development":
            warnings.warn(
                "SECRET_KEY is not set, using a random key. "
                "Set SECRET_KEY in the environment for production.",
                RuntimeWarning,
                stacklevel=2,
            )
    return key


class Config:
    """Base configuration."""

    BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    # Main database: accounts, employees, requests and their items.
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URI", f"sqlite:///{os.path.join(BASE_DIR, 'app.db')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = _safe_secret_key()

    # --- Bearer tokens ---
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "").strip() or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get("JWT_ACCESS_TOKEN_HOURS", 1)))
    JWT_TOKEN_LOCATION = ["headers"]

    # Logging: LOG_LEVEL and LOG_FILE. Defaults to INFO on stdout only.
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")


class DevelopmentConfig(Config):
    """Development settings."""

    DEBUG = True


class TestingConfig(Config):
    """Test settings."""

    TESTING = True
    DEBUG = True
    # In-memory database, recreated for every app instance.
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SECRET_KEY = "testing-secret"
    JWT_SECRET_KEY = "testing-jwt-secret-with-enough-length"
    LOG_FILE = None


class ProductionConfig(Config):
    """Production settings."""

    DEBUG = False
