import pytest

from apps.bookings.services import create_booking, transition_booking


@pytest.fixture
def booking(traveler, service):
    """Pending booking of ``service`` for three participants."""
    return create_booking(
        traveler=traveler,
        service_id=service.id,
        booking_date='2026-12-01',
        participants=3,
    )


@pytest.fixture
def confirmed_booking(booking, provider_user):
    return transition_booking(booking_id=booking.id, new_status='confirmed', actor=provider_user)


@pytest.fixture
def completed_booking(confirmed_booking, provider_user):
    return transition_booking(booking_id=confirmed_booking.id, new_status='completed', actor=provider_user)
