"""Service layer tests for bookings app."""

import pytest
from datetime import timedelta
from decimal import Decimal
from uuid import uuid4
from django.utils import timezone

from apps.bookings.models import Booking, BookingPaymentStatus, BookingStatus
from apps.bookings.services import (
    can_transition,
    cancel_booking,
    create_booking,
    get_booking,
    get_recent_activity,
    get_user_bookings,
    recompute_booking_counters,
    transition_booking,
)
from apps.bookings.services.exceptions import (
    BookingForbiddenError,
    BookingNotFoundError,
    InvalidBookingDataError,
    InvalidBookingTransitionError,
    ServiceNotAvailableError,
)
from apps.notifications.models import Notification, NotificationType


@pytest.mark.django_db
class TestCreateBooking:

    def test_total_is_price_times_participants(self, booking):
        assert booking.total_amount == Decimal('300.00')
        assert booking.status == BookingStatus.PENDING
        assert booking.payment_status == BookingPaymentStatus.PENDING

    def test_total_frozen_after_price_change(self, booking, service):
        service.price = Decimal('250.00')
        service.save()

        booking.refresh_from_db()
        assert booking.total_amount == Decimal('300.00')

    def test_provider_copied_from_service(self, booking, provider):
        assert booking.provider == provider

    def test_counters_incremented(self, booking, service, provider):
        service.refresh_from_db()
        provider.refresh_from_db()
        assert service.bookings_count == 1
        assert provider.total_bookings == 1

    def test_provider_notified(self, booking, provider_user):
        notification = Notification.objects.get(user=provider_user)
        assert notification.type == NotificationType.BOOKING_CREATED
        assert notification.data['booking_id'] == str(booking.id)

    def test_date_only_string_becomes_aware_datetime(self, booking):
        assert timezone.is_aware(booking.booking_date)
        assert booking.booking_date.date().isoformat() == '2026-12-01'

    def test_datetime_string_accepted(self, traveler, service):
        booking = create_booking(
            traveler=traveler,
            service_id=service.id,
            booking_date='2026-12-01T09:30:00Z',
        )
        assert booking.booking_date.hour == 9
        assert booking.participants == 1

    def test_malformed_date_rejected(self, traveler, service):
        with pytest.raises(InvalidBookingDataError):
            create_booking(traveler=traveler, service_id=service.id, booking_date='next tuesday')
        assert Booking.objects.count() == 0

    @pytest.mark.parametrize('participants', [0, -2, 1.5, 'many'])
    def test_invalid_participants_rejected(self, traveler, service, participants):
        with pytest.raises(InvalidBookingDataError):
            create_booking(
                traveler=traveler,
                service_id=service.id,
                booking_date='2026-12-01',
                participants=participants,
            )

    def test_participants_beyond_column_range_rejected(self, traveler, service):
        with pytest.raises(InvalidBookingDataError):
            create_booking(
                traveler=traveler,
                service_id=service.id,
                booking_date='2026-12-01',
                participants=10 ** 13,
            )
        assert Booking.objects.count() == 0

    def test_total_too_large_for_amount_rejected(self, traveler, service):
        with pytest.raises(InvalidBookingDataError):
            create_booking(
                traveler=traveler,
                service_id=service.id,
                booking_date='2026-12-01',
                participants=10 ** 9,
            )

        service.refresh_from_db()
        assert service.bookings_count == 0

    def test_provider_cannot_book(self, provider_user, service):
        with pytest.raises(BookingForbiddenError):
            create_booking(traveler=provider_user, service_id=service.id, booking_date='2026-12-01')

    def test_inactive_service_not_available(self, traveler, service):
        service.is_active = False
        service.save()

        with pytest.raises(ServiceNotAvailableError):
            create_booking(traveler=traveler, service_id=service.id, booking_date='2026-12-01')

    def test_unknown_service_not_available(self, traveler):
        with pytest.raises(ServiceNotAvailableError):
            create_booking(traveler=traveler, service_id=uuid4(), booking_date='2026-12-01')


@pytest.mark.django_db
class TestTransitions:

    @pytest.mark.parametrize('current,target,allowed', [
        ('pending', 'confirmed', True),
        ('pending', 'cancelled', True),
        ('pending', 'completed', False),
        ('confirmed', 'completed', True),
        ('confirmed', 'cancelled', True),
        ('confirmed', 'pending', False),
        ('cancelled', 'confirmed', False),
        ('completed', 'cancelled', False),
    ])
    def test_can_transition(self, current, target, allowed):
        assert can_transition(current, target) is allowed

    def test_provider_confirms_then_pending_rejected(self, booking, provider_user):
        booking = transition_booking(booking_id=booking.id, new_status='confirmed', actor=provider_user)
        assert booking.status == BookingStatus.CONFIRMED

        with pytest.raises(InvalidBookingTransitionError):
            transition_booking(booking_id=booking.id, new_status='pending', actor=provider_user)

        booking.refresh_from_db()
        assert booking.status == BookingStatus.CONFIRMED

    def test_completed_booking(self, completed_booking):
        assert completed_booking.status == BookingStatus.COMPLETED

    def test_pending_cannot_complete(self, booking, provider_user):
        with pytest.raises(InvalidBookingTransitionError):
            transition_booking(booking_id=booking.id, new_status='completed', actor=provider_user)

    def test_traveler_cannot_confirm(self, booking, traveler):
        with pytest.raises(BookingForbiddenError):
            transition_booking(booking_id=booking.id, new_status='confirmed', actor=traveler)

    def test_provider_cannot_cancel(self, booking, provider_user):
        with pytest.raises(BookingForbiddenError):
            transition_booking(booking_id=booking.id, new_status='cancelled', actor=provider_user)

    def test_other_provider_cannot_confirm(self, booking, other_provider_user):
        with pytest.raises(BookingNotFoundError):
            transition_booking(booking_id=booking.id, new_status='confirmed', actor=other_provider_user)

    @pytest.mark.parametrize('target', ['pending', 'confirmed', 'cancelled'])
    def test_stranger_gets_not_found(self, booking, other_traveler, target):
        with pytest.raises(BookingNotFoundError):
            transition_booking(booking_id=booking.id, new_status=target, actor=other_traveler)

        booking.refresh_from_db()
        assert booking.status == BookingStatus.PENDING

    def test_unknown_status(self, booking, provider_user):
        with pytest.raises(InvalidBookingTransitionError):
            transition_booking(booking_id=booking.id, new_status='archived', actor=provider_user)

    def test_unknown_booking(self, provider_user):
        with pytest.raises(BookingNotFoundError):
            transition_booking(booking_id=uuid4(), new_status='confirmed', actor=provider_user)

    def test_traveler_notified_of_confirmation(self, confirmed_booking, traveler):
        notification = Notification.objects.get(user=traveler)
        assert notification.type == NotificationType.BOOKING_STATUS
        assert notification.data['status'] == 'confirmed'
        assert notification.data['previous_status'] == 'pending'


@pytest.mark.django_db
class TestCancelBooking:

    def test_cancel_pending(self, booking, traveler, service):
        booking = cancel_booking(booking_id=booking.id, traveler=traveler)
        assert booking.status == BookingStatus.CANCELLED

        service.refresh_from_db()
        assert service.bookings_count == 1

    def test_cancel_confirmed(self, confirmed_booking, traveler):
        booking = cancel_booking(booking_id=confirmed_booking.id, traveler=traveler)
        assert booking.status == BookingStatus.CANCELLED

    def test_cancel_completed_rejected(self, completed_booking, traveler):
        with pytest.raises(InvalidBookingTransitionError):
            cancel_booking(booking_id=completed_booking.id, traveler=traveler)

    def test_cancelled_is_terminal(self, booking, traveler, provider_user):
        cancel_booking(booking_id=booking.id, traveler=traveler)

        with pytest.raises(InvalidBookingTransitionError):
            transition_booking(booking_id=booking.id, new_status='confirmed', actor=provider_user)

    def test_other_traveler_cannot_cancel(self, booking, other_traveler):
        with pytest.raises(BookingNotFoundError):
            cancel_booking(booking_id=booking.id, traveler=other_traveler)

    def test_provider_notified_of_cancellation(self, booking, traveler, provider_user):
        cancel_booking(booking_id=booking.id, traveler=traveler)

        assert Notification.objects.filter(
            user=provider_user,
            type=NotificationType.BOOKING_STATUS,
        ).count() == 1


@pytest.mark.django_db
class TestBookingQueries:

    def test_get_booking_visible_to_both_parties(self, booking, traveler, provider_user):
        assert get_booking(booking_id=booking.id, user=traveler) == booking
        assert get_booking(booking_id=booking.id, user=provider_user) == booking

    def test_get_booking_hidden_from_others(self, booking, other_traveler):
        with pytest.raises(BookingNotFoundError):
            get_booking(booking_id=booking.id, user=other_traveler)

    def test_get_booking_malformed_id(self, traveler):
        with pytest.raises(BookingNotFoundError):
            get_booking(booking_id='not-a-uuid', user=traveler)

    def test_user_bookings_for_traveler(self, booking, traveler, other_traveler):
        assert list(get_user_bookings(user=traveler)) == [booking]
        assert list(get_user_bookings(user=other_traveler)) == []

    def test_user_bookings_for_provider(self, booking, provider_user, other_provider):
        assert list(get_user_bookings(user=provider_user)) == [booking]
        assert list(get_user_bookings(user=other_provider.user)) == []

    def test_user_bookings_status_filter(self, confirmed_booking, traveler):
        assert get_user_bookings(user=traveler, status='confirmed').count() == 1
        assert get_user_bookings(user=traveler, status='pending').count() == 0

    def test_recompute_counters(self, booking, service, provider):
        Booking.objects.create(
            traveler=booking.traveler,
            service=service,
            provider=provider,
            booking_date=timezone.now() + timedelta(days=1),
            participants=1,
            total_amount=service.price,
        )

        counts = recompute_booking_counters(service.id)

        service.refresh_from_db()
        provider.refresh_from_db()
        assert counts == {'service_bookings': 2, 'provider_bookings': 2}
        assert service.bookings_count == 2
        assert provider.total_bookings == 2


@pytest.mark.django_db
class TestRecentActivity:

    def test_pending_bookings_excluded(self, booking):
        data = get_recent_activity()

        assert data['activities'] == []
        assert data['stats']['weeklyBookings'] == 0
        assert data['stats']['activeTravelers'] == 1

    def test_confirmed_booking_listed(self, confirmed_booking, service):
        data = get_recent_activity()

        activity = data['activities'][0]
        assert activity['id'] == str(confirmed_booking.id)
        assert activity['user'] == 'Amina K.'
        assert activity['action'] == f"booked {service.title}"
        assert activity['location'] == 'Ngorongoro'
        assert activity['category'] == 'safari'
        assert data['stats']['weeklyBookings'] == 1
        assert data['stats']['destinations'] == 1
        assert data['stats']['totalServices'] == 1

    def test_limit(self, confirmed_booking, traveler, service, provider_user):
        second = create_booking(traveler=traveler, service_id=service.id, booking_date='2026-12-02')
        transition_booking(booking_id=second.id, new_status='confirmed', actor=provider_user)

        assert len(get_recent_activity(limit=1)['activities']) == 1
