"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils.html import format_html

from licenses.infrastructure.models import License


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """
    Admin interface for License model.

    Owner, expiry and bound address are written only through the
    lifecycle operations, so they are read-only here.
    """

    list_display = [
        "key",
        "owner",
        "state_display",
        "duration",
        "expiry",
        "bound_address",
        "suspended",
        "created",
    ]
    list_filter = ["suspended", "created", "expiry"]
    search_fields = ["key", "owner", "bound_address"]
    readonly_fields = [
        "id",
        "key",
        "owner",
        "created",
        "duration",
        "expiry",
        "bound_address",
    ]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "key", "owner", "duration"),
            },
        ),
        (
            "Activation",
            {
                "fields": ("expiry", "bound_address", "suspended"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created",),
                "classes": ("collapse",),
            },
        ),
    )

    def state_display(self, obj):
        """Display lifecycle state with color coding."""
        if obj.suspended:
            label, color = "suspended", "orange"
        elif obj.is_active:
            label, color = "active", "green"
        else:
            colors = {"unclaimed": "gray", "claimed": "blue", "activated": "red"}
            label, color = obj.state, colors.get(obj.state, "black")
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            label.upper(),
        )

    state_display.short_description = "State"

    def has_add_permission(self, request):
        """Licenses are issued through the API so keys stay unique and random."""
        return False
