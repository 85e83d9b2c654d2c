"""Booking lookups, listings and the public activity feed."""

from datetime import timedelta
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.bookings.models import Booking, FULFILLED_STATUSES
from apps.catalog.models import Service
from apps.providers.models import ServiceProvider
from apps.providers.services import get_provider_for_user
from .exceptions import BookingNotFoundError


def _booking_queryset() -> QuerySet:
    return Booking.objects.select_related('service', 'provider', 'traveler')


def get_booking(*, booking_id: UUID, user: User) -> Booking:
    """
    Retrieve a booking visible to ``user``.

    Only the booking's traveler and the owner of its provider profile can
    see it; anyone else gets a not-found.
    """
    try:
        return _booking_queryset().get(
            Q(traveler=user) | Q(provider__user=user),
            id=booking_id,
        )
    except (Booking.DoesNotExist, ValidationError):
        raise BookingNotFoundError()


def get_user_bookings(*, user: User, status: Optional[str] = None) -> QuerySet:
    """
    Bookings relevant to ``user``, newest first.

    Travelers see their own bookings; providers see bookings made for
    their services.

    Raises:
        ProviderNotFoundError: Provider user without a provider profile
    """
    queryset = _booking_queryset()

    if user.is_service_provider:
        provider = get_provider_for_user(user=user)
        queryset = queryset.filter(provider=provider)
    else:
        queryset = queryset.filter(traveler=user)

    if status:
        queryset = queryset.filter(status=status)

    return queryset.order_by('-created_at')


def _activity_name(user: User) -> str:
    first = user.first_name or 'Anonymous'
    return f"{first} {user.last_name[0]}." if user.last_name else first


def get_recent_activity(limit: int = 10) -> dict:
    """
    Public homepage feed of recent confirmed/completed bookings.

    Returns:
        Dictionary with:
        - activities: list of {id, type, user, action, location,
          category, timestamp}
        - stats: weeklyBookings, activeTravelers, destinations,
          totalServices
    """
    now = timezone.now()
    week_ago = now - timedelta(days=7)
    month_ago = now - timedelta(days=30)

    recent = (
        Booking.objects
        .filter(status__in=FULFILLED_STATUSES)
        .select_related('service', 'traveler')
        .order_by('-created_at')[:limit]
    )

    activities = [
        {
            'id': str(booking.id),
            'type': 'booking',
            'user': _activity_name(booking.traveler),
            'action': f"booked {booking.service.title}",
            'location': booking.service.location or 'Unknown location',
            'category': booking.service.category or 'general',
            'timestamp': booking.created_at,
        }
        for booking in recent
    ]

    stats = {
        'weeklyBookings': Booking.objects.filter(
            status__in=FULFILLED_STATUSES,
            created_at__gte=week_ago,
        ).count(),
        'activeTravelers': Booking.objects.filter(
            created_at__gte=month_ago,
        ).order_by().values('traveler').distinct().count(),
        'destinations': (
            Service.objects.active().exclude(location='')
            .order_by().values('location').distinct().count()
        ),
        'totalServices': Service.objects.active().count(),
    }

    return {'activities': activities, 'stats': stats}


@transaction.atomic
def recompute_booking_counters(service_id: UUID) -> dict:
    """
    Rebuild ``Service.bookings_count`` and the owning provider's
    ``total_bookings`` from the booking table.
    """
    service = Service.objects.select_for_update().get(id=service_id)

    service_count = Booking.objects.filter(service_id=service.id).count()
    provider_count = Booking.objects.filter(provider_id=service.provider_id).count()

    Service.objects.filter(id=service.id).update(bookings_count=service_count)
    ServiceProvider.objects.filter(id=service.provider_id).update(total_bookings=provider_count)

    return {
        'service_bookings': service_count,
        'provider_bookings': provider_count,
    }
