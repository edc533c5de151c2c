"""
System checks for license settings.
"""
from django.conf import settings
from django.core import checks

from licenses.domain.license_key import MAX_KEY_BYTES, MAX_KEY_LENGTH


def check_license_key_bytes(app_configs=None, **kwargs):
    """Reject a LICENSE_KEY_BYTES whose keys would not fit the key column."""
    num_bytes = settings.LICENSE_SERVICE.get("LICENSE_KEY_BYTES")
    valid = (
        isinstance(num_bytes, int)
        and not isinstance(num_bytes, bool)
        and 1 <= num_bytes <= MAX_KEY_BYTES
    )
    if valid:
        return []
    return [
        checks.Error(
            f"LICENSE_SERVICE['LICENSE_KEY_BYTES'] must be an integer between 1 and {MAX_KEY_BYTES}",
            hint=f"Larger values produce keys longer than {MAX_KEY_LENGTH} characters.",
            obj="settings.LICENSE_SERVICE",
            id="licenses.E001",
        )
    ]
