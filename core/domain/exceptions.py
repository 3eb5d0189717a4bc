"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class LicenseKeyException(DomainException):
    """Base exception for license key errors."""

    pass


class LicenseKeyNotFoundError(LicenseKeyException):
    """Raised when a license key is not found."""

    def __init__(self, message: str = "License key not found"):
        super().__init__(message, code="LICENSE_KEY_NOT_FOUND")


class DuplicateKeyValueError(LicenseKeyException):
    """Raised when a key value is already registered."""

    def __init__(self, message: str = "A license key with this value already exists."):
        super().__init__(message, code="DUPLICATE_KEY_VALUE")


class InvalidKeyPeriodError(LicenseKeyException):
    """Raised when a key's end date precedes its start date."""

    def __init__(self, message: str = "End date cannot be before start date."):
        super().__init__(message, code="INVALID_KEY_PERIOD")


class ApplicationException(DomainException):
    """Base exception for application errors."""

    pass


class ApplicationNotFoundError(ApplicationException):
    """Raised when an application is not found."""

    def __init__(self, message: str = "Application not found"):
        super().__init__(message, code="APPLICATION_NOT_FOUND")


class ApplicationInUseError(ApplicationException):
    """Raised when deleting an application that keys still reference."""

    def __init__(
        self, message: str = "Cannot delete: application is in use by one or more keys."
    ):
        super().__init__(message, code="APPLICATION_IN_USE")


class AccountException(DomainException):
    """Base exception for admin account errors."""

    pass


class UserNotFoundError(AccountException):
    """Raised when an admin user is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, code="USER_NOT_FOUND")


class UserAlreadyExistsError(AccountException):
    """Raised when creating a user whose email is taken."""

    def __init__(self, message: str = "A user with this email already exists."):
        super().__init__(message, code="USER_ALREADY_EXISTS")


class InvalidCredentialsError(AccountException):
    """Raised when sign-in fails."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class SuperAdminProtectedError(AccountException):
    """Raised when an operation targets the superadmin account."""

    def __init__(self, message: str = "The superadmin account cannot be modified."):
        super().__init__(message, code="SUPERADMIN_PROTECTED")


class AccessException(DomainException):
    """Base exception for permission gate failures."""

    pass


class AuthenticationRequiredError(AccessException):
    """Raised when an operation needs a signed-in admin."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="AUTHENTICATION_REQUIRED")


class PermissionDeniedError(AccessException):
    """Raised when the acting admin lacks a permission."""

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message, code="PERMISSION_DENIED")
