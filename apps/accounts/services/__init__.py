"""Services for accounts business logic."""

from .exceptions import (
    UserRegistrationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    ExternalLoginRequiredError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, resolve_external_identity
from .profile_management import update_profile

__all__ = [
    # Exceptions
    'UserRegistrationError',
    'EmailAlreadyRegisteredError',
    'InvalidCredentialsError',
    'ExternalLoginRequiredError',
    'InactiveAccountError',
    # Services
    'register_user',
    'authenticate_user',
    'resolve_external_identity',
    'update_profile',
]
