"""Settings used by the pytest suite."""

from .base import *
from .base import BASE_DIR, RiotApiSettings

DEBUG = False
SECRET_KEY = "test-only-secret-key"
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(BASE_DIR / "lol_stats_test.db"),
        "TEST": {"NAME": str(BASE_DIR / "lol_stats_test.db")},
        "ATOMIC_REQUESTS": False,
        "CONN_MAX_AGE": 0,
    },
}

MIGRATE_ON_STARTUP = False

RIOT_API_CONFIG = RiotApiSettings(API_KEY="RGAPI-test-key", TIMEOUT_S=5, MATCH_COUNT=20)
