"""
Django admin configuration for accounts app.
"""
from django.contrib import admin

from accounts.infrastructure.models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """Admin interface for Account model."""

    list_display = ["username", "email", "rank", "created_at"]
    list_filter = ["rank", "created_at"]
    search_fields = ["username", "email"]
    readonly_fields = ["id", "token", "password_hash", "created_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "username", "email", "rank"),
            },
        ),
        (
            "Credentials",
            {
                "fields": ("token", "password_hash"),
                "classes": ("collapse",),
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

    def has_add_permission(self, request):
        """Accounts are created through the API or the create_account command."""
        return False
