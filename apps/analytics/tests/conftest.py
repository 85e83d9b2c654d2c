import pytest
from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from apps.bookings.models import Booking, BookingStatus


# Mid-month so the six-month series is stable
NOW = datetime(2026, 6, 15, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_booking(service):
    """Factory placing a booking of ``service`` at a given age."""

    def _make(traveler, *, days_ago, status=BookingStatus.CONFIRMED, participants=1, target=None, created_at=None):
        target = target or service
        booking = Booking.objects.create(
            traveler=traveler,
            service=target,
            provider=target.provider,
            booking_date=NOW,
            participants=participants,
            total_amount=target.price * participants,
            status=status,
        )
        stamp = created_at or NOW - timedelta(days=days_ago)
        Booking.objects.filter(id=booking.id).update(created_at=stamp)
        booking.refresh_from_db()
        return booking

    return _make


@pytest.fixture
def second_service(provider):
    from apps.catalog.models import Service

    return Service.objects.create(
        provider=provider,
        title='Materuni Waterfalls Hike',
        price=Decimal('40.00'),
    )
