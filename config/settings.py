"""
Django settings for the expression calculator project.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "calculator-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "calculator",
]

# The calculator keeps its state in memory only
DATABASES = {}

USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

CALCULATOR = {
    "INTEGER_BITS": os.environ.get("CALCULATOR_INTEGER_BITS") or None,
    "SHOW_BANNER": os.environ.get("CALCULATOR_SHOW_BANNER", "true").lower() == "true",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "calculator": {
            "handlers": ["console"],
            "level": os.environ.get("CALCULATOR_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
