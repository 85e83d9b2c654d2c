"""
Booking lifecycle: creation and status transitions.

Status machine::

    pending    -> confirmed | cancelled
    confirmed  -> completed | cancelled
    cancelled  -> (terminal)
    completed  -> (terminal)

Providers drive ``confirmed`` and ``completed``; travelers drive
``cancelled``. Counters are incremented on creation and never rolled
back on cancellation.
"""

import logging
from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.accounts.models import User
from apps.bookings.models import Booking, BookingStatus
from apps.catalog.models import Service
from apps.notifications.models import NotificationType
from apps.notifications.services import notify
from apps.providers.models import ServiceProvider
from .exceptions import (
    BookingNotFoundError,
    ServiceNotAvailableError,
    InvalidBookingDataError,
    BookingForbiddenError,
    InvalidBookingTransitionError,
)

logger = logging.getLogger(__name__)


ALLOWED_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.CANCELLED: set(),
    BookingStatus.COMPLETED: set(),
}

PROVIDER_TARGETS = {BookingStatus.CONFIRMED, BookingStatus.COMPLETED}
TRAVELER_TARGETS = {BookingStatus.CANCELLED}

# Column limits of Booking.total_amount (12 digits, 2 decimals) and Booking.participants
MAX_TOTAL_AMOUNT = Decimal('9999999999.99')
MAX_PARTICIPANTS = 2147483647


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, set())


def _parse_booking_date(value) -> datetime:
    """Accept a datetime, a date or an ISO-8601 string."""
    parsed = None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = parse_datetime(value.strip())
            if parsed is None:
                day = parse_date(value.strip())
                parsed = datetime.combine(day, time.min) if day else None
        except ValueError:
            parsed = None

    if parsed is None:
        raise InvalidBookingDataError('Booking date must be a valid ISO-8601 date')

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def _clean_participants(value) -> int:
    if value is None or isinstance(value, bool):
        raise InvalidBookingDataError('Participants is required')
    if isinstance(value, float) and not value.is_integer():
        raise InvalidBookingDataError('Participants must be a whole number')
    try:
        participants = int(value)
    except (TypeError, ValueError):
        raise InvalidBookingDataError('Participants must be a whole number')
    if participants < 1:
        raise InvalidBookingDataError('At least one participant is required')
    if participants > MAX_PARTICIPANTS:
        raise InvalidBookingDataError('Too many participants for a single booking')
    return participants


@transaction.atomic
def create_booking(
    *,
    traveler: User,
    service_id: UUID,
    booking_date,
    participants: int = 1,
    start_time: str = '',
    end_time: str = '',
    special_requests: str = ''
) -> Booking:
    """
    Book a service for a traveler.

    This operation:
    1. Validates the caller, date and participant count
    2. Freezes ``total_amount = price * participants``
    3. Creates the booking as pending/pending
    4. Increments service and provider booking counters
    5. Notifies the provider

    Args:
        traveler: Traveler making the booking
        service_id: UUID of the service to book
        booking_date: date, datetime or ISO-8601 string
        participants: Number of people (>= 1)
        start_time: Optional start time label
        end_time: Optional end time label
        special_requests: Free text for the provider

    Returns:
        Created Booking instance

    Raises:
        BookingForbiddenError: If caller is not a traveler
        InvalidBookingDataError: If date is malformed, participants < 1 or
            the total does not fit a booking amount
        ServiceNotAvailableError: If service is missing or inactive
    """
    if not traveler.is_traveler:
        raise BookingForbiddenError('Only travelers can create bookings')

    participants = _clean_participants(participants)
    booking_at = _parse_booking_date(booking_date)

    try:
        service = Service.objects.select_related('provider__user').get(id=service_id, is_active=True)
    except (Service.DoesNotExist, ValidationError):
        raise ServiceNotAvailableError()

    total_amount = service.price * participants
    if total_amount > MAX_TOTAL_AMOUNT:
        raise InvalidBookingDataError('Too many participants for a single booking')

    booking = Booking.objects.create(
        traveler=traveler,
        service=service,
        provider=service.provider,
        booking_date=booking_at,
        start_time=start_time or '',
        end_time=end_time or '',
        participants=participants,
        total_amount=total_amount,
        special_requests=special_requests or '',
        status=BookingStatus.PENDING,
    )

    Service.objects.filter(id=service.id).update(bookings_count=F('bookings_count') + 1)
    ServiceProvider.objects.filter(id=service.provider_id).update(
        total_bookings=F('total_bookings') + 1
    )

    notify(
        user=service.provider.user,
        type=NotificationType.BOOKING_CREATED,
        title='New booking',
        message=f"{traveler.get_display_name()} booked {service.title} for {participants} participant(s)",
        data={'booking_id': str(booking.id), 'service_id': str(service.id)},
    )

    logger.info(
        "Booking %s created: traveler=%s service=%s participants=%s total=%s",
        booking.id,
        traveler.id,
        service.id,
        participants,
        booking.total_amount,
    )
    return booking


@transaction.atomic
def transition_booking(*, booking_id: UUID, new_status: str, actor: User) -> Booking:
    """
    Move a booking to ``new_status``.

    Raises:
        BookingNotFoundError: Booking doesn't exist or the actor is not a party to it
        BookingForbiddenError: Actor's role may not drive this target
        InvalidBookingTransitionError: Unknown target or not allowed from
            the current status
    """
    if new_status not in BookingStatus.values:
        raise InvalidBookingTransitionError(f"Unknown booking status: '{new_status}'")

    try:
        booking = (
            Booking.objects
            .select_for_update()
            .select_related('provider__user', 'service', 'traveler')
            .get(id=booking_id)
        )
    except (Booking.DoesNotExist, ValidationError):
        raise BookingNotFoundError()

    is_provider = booking.provider.user_id == actor.pk
    is_traveler = booking.traveler_id == actor.pk
    if not (is_provider or is_traveler):
        raise BookingNotFoundError()

    if new_status in PROVIDER_TARGETS and not is_provider:
        raise BookingForbiddenError('Only the service provider can confirm or complete a booking')
    if new_status in TRAVELER_TARGETS and not is_traveler:
        raise BookingForbiddenError('Only the traveler can cancel a booking')

    if not can_transition(booking.status, new_status):
        raise InvalidBookingTransitionError(
            f"Cannot change booking from '{booking.status}' to '{new_status}'"
        )

    previous = booking.status
    booking.status = new_status
    booking.save(update_fields=['status', 'updated_at'])

    recipient = booking.traveler if is_provider else booking.provider.user
    notify(
        user=recipient,
        type=NotificationType.BOOKING_STATUS,
        title=f"Booking {new_status}",
        message=f"Your booking for {booking.service.title} is now {new_status}",
        data={'booking_id': str(booking.id), 'status': new_status, 'previous_status': previous},
    )

    logger.info("Booking %s: %s -> %s by user %s", booking.id, previous, new_status, actor.pk)
    return booking


def cancel_booking(*, booking_id: UUID, traveler: User) -> Booking:
    """Traveler cancels their own booking."""
    return transition_booking(
        booking_id=booking_id,
        new_status=BookingStatus.CANCELLED,
        actor=traveler,
    )
