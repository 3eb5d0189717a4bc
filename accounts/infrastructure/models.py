"""
AdminUser model.
"""
import uuid

from django.contrib.auth.hashers import check_password, make_password
from django.db import models


class AdminUser(models.Model):
    """
    An administrator of the KeyGuard panel.

    ``permissions`` maps permission names to flags and is null for
    the superadmin.
    """

    ROLE_CHOICES = [
        ("admin", "Admin"),
        ("superadmin", "Superadmin"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="admin")
    password = models.CharField(max_length=128)
    permissions = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} <{self.email}>"

    def save(self, *args, **kwargs):
        """Normalize the email before saving."""
        self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    def set_password(self, raw_password: str) -> None:
        """Hash and store a password."""
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        """Verify a raw password against the stored hash."""
        return check_password(raw_password, self.password)
