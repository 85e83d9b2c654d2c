"""Services for bookings business logic."""

from .exceptions import (
    BookingNotFoundError,
    ServiceNotAvailableError,
    InvalidBookingDataError,
    BookingForbiddenError,
    InvalidBookingTransitionError,
)
from .booking_lifecycle import (
    ALLOWED_TRANSITIONS,
    can_transition,
    create_booking,
    transition_booking,
    cancel_booking,
)
from .booking_queries import (
    get_booking,
    get_user_bookings,
    get_recent_activity,
    recompute_booking_counters,
)

__all__ = [
    # Exceptions
    'BookingNotFoundError',
    'ServiceNotAvailableError',
    'InvalidBookingDataError',
    'BookingForbiddenError',
    'InvalidBookingTransitionError',
    # Lifecycle
    'ALLOWED_TRANSITIONS',
    'can_transition',
    'create_booking',
    'transition_booking',
    'cancel_booking',
    # Queries
    'get_booking',
    'get_user_bookings',
    'get_recent_activity',
    'recompute_booking_counters',
]
