"""
Django settings for the shiftlog service.

Everything deployment-specific is read from the environment (or a ``.env``
file) through python-decouple. ``DATABASE_URL`` selects the database and
falls back to a local SQLite file.
"""

import sys
from pathlib import Path

import dj_database_url
from decouple import Csv, config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config("SECRET_KEY", default="")
if not SECRET_KEY:
    raise ValueError("SECRET_KEY environment variable must be set")

DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=Csv())

RUNNING_TESTS = "test" in sys.argv or "pytest" in sys.modules

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "rest_framework.authtoken",
    "django_filters",
    "corsheaders",
    # shift accounting
    "users",
    "shifts",
    "payroll",
    "integrations",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "shiftlog.urls"
WSGI_APPLICATION = "shiftlog.wsgi.application"

# Only the admin renders templates
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASE_URL = config("DATABASE_URL", default="")
if DATABASE_URL:
    DATABASES = {"default": dj_database_url.parse(DATABASE_URL, conn_max_age=60)}
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "shiftlog.sqlite3",
        }
    }

# Pay overrides are cached per process
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "shiftlog",
    }
}

if not DEBUG and not RUNNING_TESTS:
    SECURE_SSL_REDIRECT = config("SECURE_SSL_REDIRECT", default=False, cast=bool)
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

CORS_ALLOWED_ORIGINS = config(
    "CORS_ALLOWED_ORIGINS", default="http://localhost:3000", cast=Csv()
)
CORS_ALLOW_ALL_ORIGINS = DEBUG

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.TokenAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.IsAuthenticated"],
    "DEFAULT_PAGINATION_CLASS": "core.pagination.StandardResultsSetPagination",
    "DEFAULT_FILTER_BACKENDS": ["django_filters.rest_framework.DjangoFilterBackend"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
    # hours, rate and total_pay go out as JSON numbers
    "COERCE_DECIMAL_TO_STRING": False,
}

SHIFT_ACCOUNTING = {
    # XP and points stay on the ledger when a shift is deleted unless enabled
    "REVERSE_REWARDS_ON_DELETE": config(
        "REVERSE_REWARDS_ON_DELETE", default=False, cast=bool
    ),
    "PAY_OVERRIDE_CACHE_TIMEOUT": config(
        "PAY_OVERRIDE_CACHE_TIMEOUT", default=3600, cast=int
    ),
}

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = config("TIME_ZONE", default="America/Vancouver")
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Logging: console while developing, a rotating file otherwise.
# Every handler passes through the PII redactor.
LOG_DIR = Path(config("LOG_DIR", default=str(BASE_DIR / "logs")))
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
APP_LOGGERS = ("shiftlog", "core", "users", "shifts", "payroll", "integrations")

LOG_DIR.mkdir(parents=True, exist_ok=True)
_handlers = ["console"] if DEBUG else ["shiftlog_file"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "redact_pii": {"()": "shiftlog.logging_filters.PIIRedactorFilter"},
    },
    "formatters": {
        "short": {"format": "{levelname} {name}: {message}", "style": "{"},
        "timestamped": {
            "format": "{asctime} {levelname} {name} [{process:d}] {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "short",
            "filters": ["redact_pii"],
        },
        "shiftlog_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "shiftlog.log",
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "encoding": "utf-8",
            "formatter": "timestamped",
            "filters": ["redact_pii"],
        },
    },
    "loggers": {
        "django": {"handlers": _handlers, "level": "INFO", "propagate": False},
        **{
            name: {"handlers": _handlers, "level": LOG_LEVEL, "propagate": False}
            for name in APP_LOGGERS
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
}
