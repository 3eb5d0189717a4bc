"""
Django admin configuration for applications app.
"""
from django.contrib import admin

from applications.infrastructure.models import Application


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    """Admin interface for Application model."""

    list_display = ["name", "key_count", "created_at"]
    search_fields = ["name"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def key_count(self, obj):
        """Number of license keys issued for the application."""
        return obj.license_keys.count()

    key_count.short_description = "Keys"
