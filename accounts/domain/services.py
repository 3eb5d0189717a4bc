"""
Access policy domain service.

Every mutating operation passes through the policy before touching the
repositories.
"""
from typing import Optional

from accounts.domain.user import AdminUser
from core.domain.exceptions import AuthenticationRequiredError, PermissionDeniedError
from core.domain.value_objects import Permission


class AccessPolicy:
    """Domain service gating operations on the acting admin."""

    @staticmethod
    def ensure_authenticated(actor: Optional[AdminUser]) -> AdminUser:
        """
        Require a signed-in admin.

        Raises:
            AuthenticationRequiredError: If there is no actor
        """
        if actor is None:
            raise AuthenticationRequiredError()
        return actor

    @staticmethod
    def ensure_permission(actor: Optional[AdminUser], permission: Permission) -> AdminUser:
        """
        Require an admin holding ``permission``.

        Raises:
            AuthenticationRequiredError: If there is no actor
            PermissionDeniedError: If the actor lacks the permission
        """
        actor = AccessPolicy.ensure_authenticated(actor)
        if not actor.can(permission):
            raise PermissionDeniedError(f"Missing permission: {permission.label}")
        return actor

    @staticmethod
    def ensure_superadmin(actor: Optional[AdminUser]) -> AdminUser:
        """
        Require the superadmin.

        Raises:
            AuthenticationRequiredError: If there is no actor
            PermissionDeniedError: If the actor is not the superadmin
        """
        actor = AccessPolicy.ensure_authenticated(actor)
        if not actor.is_superadmin:
            raise PermissionDeniedError("Only the superadmin can manage users")
        return actor
