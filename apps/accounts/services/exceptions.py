"""Domain-specific exceptions for accounts services."""

from apps.common.exceptions import (
    ConflictError,
    DomainValidationError,
    ForbiddenError,
    NotAuthenticatedError,
)


class UserRegistrationError(DomainValidationError):
    """Raised when registration data is unusable."""
    default_message = 'Registration failed'


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when the email already belongs to an account."""
    default_message = 'User already exists with this email'


class InvalidCredentialsError(NotAuthenticatedError):
    """Raised when authentication credentials are invalid."""
    default_message = 'Invalid credentials'


class ExternalLoginRequiredError(DomainValidationError):
    """Raised on password login for an account that only has a Google identity."""
    default_message = 'Please use Google login for this account'


class InactiveAccountError(ForbiddenError):
    """Raised when account is deactivated."""
    default_message = 'Account is deactivated'
