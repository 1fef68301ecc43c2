# ruff: noqa: ERA001
"""
Base settings for the LoL stats project.

These settings are suitable for production.
Local development settings should override these in 'local.py'.
"""

from pathlib import Path

import environ
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.log import LOGGING

# Project structure
BASE_DIR = Path(__file__).resolve(strict=True).parent.parent.parent
APPS_DIR = BASE_DIR

# Environment variables setup
env = environ.Env()
READ_DOT_ENV_FILE = env.bool("DJANGO_READ_DOT_ENV_FILE", default=False)
if READ_DOT_ENV_FILE:
    env.read_env(str(BASE_DIR / ".env"))

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = env.bool("DJANGO_DEBUG", False)
TIME_ZONE = "UTC"
LANGUAGE_CODE = "en-us"
USE_I18N = False
USE_TZ = True

# URLS & APPLICATIONS
# ------------------------------------------------------------------------------
ROOT_URLCONF = "config.urls"
ASGI_APPLICATION = "config.asgi.application"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# DATABASES
# ------------------------------------------------------------------------------
DATABASES = {
    "default": env.db_url(
        "DATABASE_URL",
        default=f"sqlite:///{BASE_DIR / 'lol_stats.db'}",
    ),
}
DATABASES["default"]["ATOMIC_REQUESTS"] = False
DATABASES["default"]["CONN_MAX_AGE"] = env.int("CONN_MAX_AGE", default=60)

# Apply pending migrations from the ASGI lifespan (idempotent).
MIGRATE_ON_STARTUP = env.bool("MIGRATE_ON_STARTUP", default=True)

# APPS
# ------------------------------------------------------------------------------
DJANGO_APPS = [
    "django.contrib.contenttypes",
]
THIRD_PARTY_APPS = [
    # Add third-party apps here
]
LOCAL_APPS = [
    "apps.core.apps.CoreConfig",
    "apps.players.apps.PlayersConfig",
    "apps.matches.apps.MatchesConfig",
]
INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# MIDDLEWARE
# ------------------------------------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# SECURITY
# ------------------------------------------------------------------------------
ALLOWED_HOSTS = env.list("DJANGO_ALLOWED_HOSTS", default=[])
X_FRAME_OPTIONS = "DENY"
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=["*"])

# RIOT API CONFIG
# ------------------------------------------------------------------------------


class RiotApiSettings(BaseSettings):
    API_KEY: str | None = None
    TIMEOUT_S: int = 10
    MATCH_COUNT: int = 20

    model_config = SettingsConfigDict(env_prefix="RIOT_", frozen=True)


RIOT_API_CONFIG = RiotApiSettings()  # attribute-style access

SECRET_KEY = env("DJANGO_SECRET_KEY", default=None)

APP_VERSION = env("APP_VERSION", default="0.1.0")
ENVIRONMENT = env("DJANGO_ENV", default="dev")
APPEND_SLASH = False
