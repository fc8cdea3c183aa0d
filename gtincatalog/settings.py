"""Django settings for gtincatalog.

Only what the management commands and the Brocade client need. Values come
from the environment.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "gtincatalog-insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "gtincatalog",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True

# --- Brocade catalog client ---
BROCADE_BASE_URL = os.environ.get("BROCADE_BASE_URL", "https://www.brocade.io/products")
BROCADE_TIMEOUT = int(os.environ.get("BROCADE_TIMEOUT", "30"))
BROCADE_MAX_RETRIES = int(os.environ.get("BROCADE_MAX_RETRIES", "0"))
BROCADE_BACKOFF_FACTOR = float(os.environ.get("BROCADE_BACKOFF_FACTOR", "0.0"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "gtincatalog": {
            "handlers": ["console"],
            "level": os.environ.get("GTINCATALOG_LOG_LEVEL", "INFO"),
        },
    },
}
