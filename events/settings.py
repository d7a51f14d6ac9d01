"""Django settings for the event attendance console.

There is no database: events live in memory and are persisted to
EVENTS_DATA_FILE by events.stores.FileEventStore.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "event-attendance-console")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() == "true"

INSTALLED_APPS = [
    "rest_framework",
    "events",
]

DATABASES = {}

# Event times are calendar values typed by the user, not instants.
USE_TZ = False
USE_I18N = False

EVENTS_DATA_FILE = os.getenv("EVENTS_DATA_FILE", "events.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "events": {
            "level": LOG_LEVEL,
        },
    },
}
