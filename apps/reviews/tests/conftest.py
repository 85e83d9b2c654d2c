import pytest
from datetime import timedelta
from django.utils import timezone

from apps.bookings.models import Booking, BookingStatus


@pytest.fixture
def completed_booking(traveler, service):
    """A completed booking of ``service`` by ``traveler``."""
    return Booking.objects.create(
        traveler=traveler,
        service=service,
        provider=service.provider,
        booking_date=timezone.now() - timedelta(days=3),
        participants=2,
        total_amount=service.price * 2,
        status=BookingStatus.COMPLETED,
    )


@pytest.fixture
def pending_booking(traveler, service):
    return Booking.objects.create(
        traveler=traveler,
        service=service,
        provider=service.provider,
        booking_date=timezone.now() + timedelta(days=3),
        participants=1,
        total_amount=service.price,
    )
