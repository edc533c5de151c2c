"""
App configuration for License Key Service.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

# Management commands that never serve traffic
SKIP_OBSERVABILITY_COMMANDS = {
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "test",
    "check",
    "createsuperuser",
}


class LicenseKeyServiceConfig(AppConfig):
    """App configuration for LicenseKeyService."""

    name = "LicenseKeyService"
    verbose_name = "License Key Service"

    def ready(self):
        """Register checks and event handlers and, when serving, tracing and metrics."""
        from django.core import checks

        from core.infrastructure.event_handlers import register_event_handlers
        from licenses.checks import check_license_key_bytes

        checks.register(check_license_key_bytes)
        register_event_handlers()

        if len(sys.argv) > 1 and sys.argv[1] in SKIP_OBSERVABILITY_COMMANDS:
            return
        if "pytest" in sys.modules or os.environ.get("OTEL_SDK_DISABLED") == "true":
            return
        # Django's autoreloader imports the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()
