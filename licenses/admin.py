"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from licenses.infrastructure.models import License


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "key",
        "owner",
        "product",
        "one_time",
        "validity_display",
        "expire_time",
        "created_at",
    ]
    list_filter = ["one_time", "expire_time", "created_at"]
    search_fields = ["key", "owner", "product"]
    readonly_fields = ["key", "owner", "created_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("key", "owner", "product", "one_time"),
            },
        ),
        (
            "Expiration",
            {
                "fields": ("expire_time",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at",),
                "classes": ("collapse",),
            },
        ),
    )

    def validity_display(self, obj):
        """Display validity with color coding."""
        if timezone.now() < obj.expire_time:
            return format_html('<span style="color: green; font-weight: bold;">VALID</span>')
        return format_html('<span style="color: gray; font-weight: bold;">EXPIRED</span>')

    validity_display.short_description = "Validity"
