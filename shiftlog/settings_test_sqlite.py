"""
Test settings: in-memory SQLite, no migrations, fast hashing.

Row locks are not exercised on SQLite; the concurrency tests skip there.
"""

import os

os.environ.setdefault("SECRET_KEY", "shiftlog-test-only-secret")

from .settings import *  # noqa: E402,F401,F403
from .settings import REST_FRAMEWORK

DEBUG = False

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


class _SkipMigrations:
    """Build test tables straight from the models."""

    def __contains__(self, app_label):
        return True

    def __getitem__(self, app_label):
        return None


MIGRATION_MODULES = _SkipMigrations()

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "shiftlog-tests",
    }
}

REST_FRAMEWORK = {**REST_FRAMEWORK, "PAGE_SIZE": 5}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "root": {"handlers": ["console"], "level": "WARNING"},
}
