"""
Development settings for LicenseKeyService.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Database - PostgreSQL by default, DB_ENGINE=sqlite for a local file
if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

# Development-only signing secret when none is configured
if not LICENSE_SERVICE["JWT_SECRET"]:  # noqa: F405
    LICENSE_SERVICE["JWT_SECRET"] = "dev-only-insecure-signing-secret"  # noqa: F405
