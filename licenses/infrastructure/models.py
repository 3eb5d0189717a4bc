"""
LicenseKey model.
"""
import uuid
from datetime import timedelta

from django.db import models


class LicenseKeyQuerySet(models.QuerySet):
    """QuerySet deriving key status in SQL."""

    def with_status(self, status: str, today):
        """
        Filter keys by derived status on ``today``.

        Args:
            status: One of Active, Expired, Pending, Deactivated
            today: Day statuses are derived for

        Returns:
            Filtered queryset
        """
        if status == "Deactivated":
            return self.filter(is_active=False)
        if status == "Pending":
            return self.filter(is_active=True, start_date__gt=today)
        if status == "Expired":
            return self.filter(is_active=True, end_date__lt=today)
        if status == "Active":
            return self.filter(is_active=True, start_date__lte=today, end_date__gte=today)
        return self.none()

    def expiring_within(self, today, days: int):
        """Active keys whose last valid day falls within the next ``days`` days."""
        return self.with_status("Active", today).filter(
            end_date__lte=today + timedelta(days=days)
        )


class LicenseKey(models.Model):
    """
    A license key granting a user access to one application
    between start_date and end_date (inclusive) while active.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    key_value = models.CharField(max_length=100, unique=True, db_index=True)
    application = models.ForeignKey(
        "applications.Application",
        on_delete=models.PROTECT,
        related_name="license_keys",
    )
    user_name = models.CharField(max_length=255)
    user_contact = models.CharField(max_length=255, help_text="Email or phone")
    start_date = models.DateField()
    end_date = models.DateField()
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = LicenseKeyQuerySet.as_manager()

    class Meta:
        db_table = "license_keys"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["application", "is_active"], name="license_key_applica_5c1e2b_idx"),
            models.Index(fields=["end_date"], name="license_key_end_dat_8f3a41_idx"),
        ]

    def __str__(self):
        return self.key_value
