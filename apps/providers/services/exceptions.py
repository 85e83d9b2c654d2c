"""Domain exceptions for providers app."""

from apps.common.exceptions import ForbiddenError, NotFoundError


class ProviderNotFoundError(NotFoundError):
    """Provider profile does not exist."""
    default_message = 'Provider profile not found'


class NotServiceProviderError(ForbiddenError):
    """Caller is not registered as a service provider."""
    default_message = 'Only service providers can perform this action'
