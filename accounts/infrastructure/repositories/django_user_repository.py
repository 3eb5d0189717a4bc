"""
Django implementation of UserRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from accounts.domain.user import AdminUser, parse_permissions
from accounts.infrastructure.models import AdminUser as AdminUserModel
from accounts.ports.user_repository import UserRepository
from core.domain.value_objects import Email, Role


class DjangoUserRepository(UserRepository):
    """
    Django ORM implementation of UserRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Hashes and verifies passwords with Django's hashers
    3. Implements repository interface
    """

    def _to_domain(self, model: AdminUserModel) -> AdminUser:
        """
        Convert Django model to domain entity.

        Args:
            model: Django AdminUser model

        Returns:
            AdminUser domain entity
        """
        role = Role(model.role)
        permissions = None
        if role != Role.SUPERADMIN:
            permissions = parse_permissions(model.permissions)
        return AdminUser(
            id=model.id,
            email=Email(model.email),
            name=model.name,
            role=role,
            permissions=permissions,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _permissions_to_model(self, user: AdminUser) -> Optional[dict]:
        """Serialize the permission map for the JSON column."""
        if user.permissions is None:
            return None
        return {permission.value: granted for permission, granted in user.permissions.items()}

    @sync_to_async
    def add(self, user: AdminUser, raw_password: str) -> AdminUser:
        """
        Persist a new user with a password.

        Args:
            user: AdminUser entity to add
            raw_password: Password to store

        Returns:
            Saved user entity
        """
        model = AdminUserModel(
            id=user.id,
            email=user.email.value,
            name=user.name,
            role=user.role.value,
            permissions=self._permissions_to_model(user),
        )
        model.set_password(raw_password)
        model.save()
        return self._to_domain(model)

    @sync_to_async
    def save(self, user: AdminUser) -> AdminUser:
        """
        Save changes to an existing user.

        Args:
            user: AdminUser entity to save

        Returns:
            Saved user entity
        """
        # pylint: disable=no-member
        model = AdminUserModel.objects.get(id=user.id)
        model.name = user.name
        model.permissions = self._permissions_to_model(user)
        model.save(update_fields=["name", "permissions", "updated_at"])
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, user_id: uuid.UUID) -> Optional[AdminUser]:
        """
        Find a user by ID.

        Args:
            user_id: User UUID

        Returns:
            AdminUser entity or None if not found
        """
        try:
            # pylint: disable=no-member
            return self._to_domain(AdminUserModel.objects.get(id=user_id))
        except AdminUserModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def find_by_email(self, email: str) -> Optional[AdminUser]:
        """
        Find a user by email (case-insensitive).

        Args:
            email: Sign-in email

        Returns:
            AdminUser entity or None if not found
        """
        # pylint: disable=no-member
        model = AdminUserModel.objects.filter(email=email.strip().lower()).first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def list_all(self) -> List[AdminUser]:
        """
        List all users ordered by name.

        Returns:
            List of AdminUser entities
        """
        # pylint: disable=no-member
        return [self._to_domain(model) for model in AdminUserModel.objects.order_by("name")]

    @sync_to_async
    def delete(self, user_id: uuid.UUID) -> None:
        """
        Delete a user.

        Args:
            user_id: User UUID
        """
        # pylint: disable=no-member
        AdminUserModel.objects.filter(id=user_id).delete()

    @sync_to_async
    def set_password(self, user_id: uuid.UUID, raw_password: str) -> None:
        """
        Replace a user's password.

        Args:
            user_id: User UUID
            raw_password: New password
        """
        # pylint: disable=no-member
        model = AdminUserModel.objects.get(id=user_id)
        model.set_password(raw_password)
        model.save(update_fields=["password", "updated_at"])

    @sync_to_async
    def check_credentials(self, email: str, raw_password: str) -> Optional[AdminUser]:
        """
        Verify an email/password pair.

        Args:
            email: Sign-in email (case-insensitive)
            raw_password: Password to check

        Returns:
            The matching AdminUser, or None
        """
        # pylint: disable=no-member
        model = AdminUserModel.objects.filter(email=email.strip().lower()).first()
        if model is None or not model.check_password(raw_password):
            return None
        return self._to_domain(model)
