"""Domain exceptions for catalog app."""

from apps.common.exceptions import (
    DomainValidationError,
    ForbiddenError,
    NotFoundError,
)


class ServiceNotFoundError(NotFoundError):
    """Service does not exist."""
    default_message = 'Service not found'


class ServiceOwnershipError(ForbiddenError):
    """Caller does not own the service's provider profile."""
    default_message = 'You can only manage your own services'


class InvalidServiceDataError(DomainValidationError):
    """Service fields fail validation (missing title, negative price...)."""
    default_message = 'Invalid service data'


class InvalidPromotionError(DomainValidationError):
    """Unknown promotion type or non-positive duration."""
    default_message = 'Invalid promotion request'
