"""
Django admin configuration for accounts app.
"""
from django.conf import settings
from django.contrib import admin, messages
from django.utils.html import format_html_join

from accounts.infrastructure.models import AdminUser
from core.domain.value_objects import Permission


@admin.register(AdminUser)
class AdminUserAdmin(admin.ModelAdmin):
    """Admin interface for AdminUser model."""

    list_display = ["name", "email", "role", "permissions_display", "created_at"]
    list_filter = ["role", "created_at"]
    search_fields = ["name", "email"]
    readonly_fields = ["id", "role", "password", "created_at", "updated_at"]
    actions = ["reset_password"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "email", "role"),
            },
        ),
        (
            "Permissions",
            {
                "fields": ("permissions",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def permissions_display(self, obj):
        """Display granted permission labels."""
        if obj.role == "superadmin":
            return "All permissions"
        granted = [
            (permission.label,)
            for permission in Permission
            if (obj.permissions or {}).get(permission.value)
        ]
        if not granted:
            return "-"
        return format_html_join(", ", "{}", granted)

    permissions_display.short_description = "Permissions"

    @admin.action(description="Reset password to the default")
    def reset_password(self, request, queryset):
        """Reset passwords of the selected admins, skipping the superadmin."""
        default_password = settings.KEYGUARD["DEFAULT_RESET_PASSWORD"]
        count = 0
        for user in queryset.exclude(role="superadmin"):
            user.set_password(default_password)
            user.save(update_fields=["password", "updated_at"])
            count += 1
        self.message_user(request, f"Reset {count} password(s).", messages.SUCCESS)

    def has_delete_permission(self, request, obj=None):
        """The superadmin account cannot be deleted."""
        if obj is not None and obj.role == "superadmin":
            return False
        return super().has_delete_permission(request, obj)
