"""Services for providers business logic."""

from .exceptions import ProviderNotFoundError, NotServiceProviderError
from .provider_management import (
    get_provider_for_user,
    get_provider,
    list_providers,
    update_provider_profile,
)

__all__ = [
    # Exceptions
    'ProviderNotFoundError',
    'NotServiceProviderError',
    # Services
    'get_provider_for_user',
    'get_provider',
    'list_providers',
    'update_provider_profile',
]
