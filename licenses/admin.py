"""
Django admin configuration for licenses app.
"""
from django.contrib import admin, messages
from django.utils import timezone
from django.utils.html import format_html

from core.domain.value_objects import KeyStatus
from licenses.infrastructure.models import LicenseKey
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)


class KeyStatusFilter(admin.SimpleListFilter):
    """Filter keys by their derived status."""

    title = "status"
    parameter_name = "status"

    def lookups(self, request, model_admin):
        return [(status.value, status.value) for status in KeyStatus]

    def queryset(self, request, queryset):
        if not self.value():
            return queryset
        return queryset.with_status(self.value(), timezone.localdate())


@admin.register(LicenseKey)
class LicenseKeyAdmin(admin.ModelAdmin):
    """Admin interface for LicenseKey model."""

    list_display = [
        "key_value",
        "application",
        "user_name",
        "user_contact",
        "start_date",
        "end_date",
        "status_display",
        "created_at",
    ]
    list_filter = [KeyStatusFilter, "application", "is_active"]
    search_fields = ["key_value", "user_name", "user_contact", "application__name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    actions = ["activate_keys", "deactivate_keys"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "key_value", "application", "is_active"),
            },
        ),
        (
            "Key Holder",
            {
                "fields": ("user_name", "user_contact"),
            },
        ),
        (
            "Validity",
            {
                "fields": ("start_date", "end_date"),
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

    def status_display(self, obj):
        """Display status with color coding."""
        colors = {
            KeyStatus.ACTIVE: "green",
            KeyStatus.PENDING: "orange",
            KeyStatus.EXPIRED: "gray",
            KeyStatus.DEACTIVATED: "red",
        }
        status = DjangoLicenseKeyRepository()._to_domain(obj).status(timezone.localdate())
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            colors[status],
            status.value,
        )

    status_display.short_description = "Status"

    @admin.action(description="Activate selected keys")
    def activate_keys(self, request, queryset):
        """Set the active flag on the selected keys."""
        count = queryset.update(is_active=True, updated_at=timezone.now())
        self.message_user(request, f"Activated {count} key(s).", messages.SUCCESS)

    @admin.action(description="Deactivate selected keys")
    def deactivate_keys(self, request, queryset):
        """Clear the active flag on the selected keys."""
        count = queryset.update(is_active=False, updated_at=timezone.now())
        self.message_user(request, f"Deactivated {count} key(s).", messages.SUCCESS)

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("application")
