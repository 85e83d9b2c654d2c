"""Domain exceptions for bookings app."""

from apps.common.exceptions import (
    DomainValidationError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
)


class BookingNotFoundError(NotFoundError):
    """Booking does not exist or is not visible to the caller."""
    default_message = 'Booking not found'


class ServiceNotAvailableError(NotFoundError):
    """Service does not exist or is not accepting bookings."""
    default_message = 'Service not available'


class InvalidBookingDataError(DomainValidationError):
    """Malformed booking date or participant count."""
    default_message = 'Invalid booking data'


class BookingForbiddenError(ForbiddenError):
    """Caller's role does not allow this booking action."""
    default_message = 'You are not allowed to change this booking'


class InvalidBookingTransitionError(InvalidTransitionError):
    """Status change not permitted from the booking's current status."""
    default_message = 'Invalid booking status transition'
