"""
Django admin configuration for accounts app.
"""
from django.contrib import admin

from accounts.infrastructure.models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """Admin interface for Account model. Password hashes are never shown."""

    list_display = ["login", "created_at"]
    search_fields = ["login"]
    exclude = ["password_hash"]
    readonly_fields = ["login", "created_at"]

    def has_add_permission(self, request):
        """Accounts are created through the register endpoint."""
        return False
