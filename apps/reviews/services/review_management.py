"""Review management service - traveler reviews of services."""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.bookings.models import Booking, BookingStatus
from apps.catalog.models import Service
from apps.reviews.models import Review
from .exceptions import (
    DuplicateReviewError,
    InvalidRatingError,
    ReviewBookingNotFoundError,
    ReviewedServiceNotFoundError,
    ReviewForbiddenError,
)
from .rating_aggregation import update_provider_rating, update_service_rating

logger = logging.getLogger(__name__)


def _clean_rating(rating) -> int:
    if rating is None or isinstance(rating, bool):
        raise InvalidRatingError()
    try:
        value = int(rating)
    except (TypeError, ValueError):
        raise InvalidRatingError()
    if value != rating and str(value) != str(rating).strip():
        raise InvalidRatingError()
    if not 1 <= value <= 5:
        raise InvalidRatingError()
    return value


@transaction.atomic
def create_review(
    *,
    traveler: User,
    service_id: UUID,
    rating: int,
    comment: str = '',
    booking_id: Optional[UUID] = None
) -> Review:
    """
    Create a review for a service.

    This operation:
    1. Validates rating (1-5)
    2. When a booking is given, checks it is the traveler's own
       completed booking of the same service and not yet reviewed
    3. Creates the review
    4. Recomputes the service's ``average_rating`` and the provider's
       ``rating``

    Raises:
        InvalidRatingError: Rating outside 1-5
        ReviewForbiddenError: Caller is not a traveler, or the booking is
            not theirs / not completed / for another service
        ReviewedServiceNotFoundError: Service doesn't exist
        ReviewBookingNotFoundError: Booking doesn't exist
        DuplicateReviewError: Booking already reviewed
    """
    if not traveler.is_traveler:
        raise ReviewForbiddenError('Only travelers can write reviews')

    rating = _clean_rating(rating)

    try:
        service = Service.objects.select_related('provider').get(id=service_id)
    except (Service.DoesNotExist, ValidationError):
        raise ReviewedServiceNotFoundError()

    booking = None
    if booking_id:
        try:
            booking = Booking.objects.get(id=booking_id)
        except (Booking.DoesNotExist, ValidationError):
            raise ReviewBookingNotFoundError()

        if booking.traveler_id != traveler.pk or booking.service_id != service.id:
            raise ReviewForbiddenError('You can only review your own booking of this service')
        if booking.status != BookingStatus.COMPLETED:
            raise ReviewForbiddenError('Only completed bookings can be reviewed')
        if Review.objects.filter(booking=booking).exists():
            raise DuplicateReviewError()

    try:
        with transaction.atomic():
            review = Review.objects.create(
                booking=booking,
                traveler=traveler,
                service=service,
                provider=service.provider,
                rating=rating,
                comment=comment or '',
            )
    except IntegrityError:
        raise DuplicateReviewError()

    update_service_rating(service_id=service.id)
    update_provider_rating(provider_id=service.provider_id)

    logger.info("Review %s created: service=%s rating=%s", review.id, service.id, rating)
    return review


def list_service_reviews(*, service_id: Optional[UUID] = None) -> QuerySet:
    """Reviews newest first, optionally for a single service."""
    queryset = Review.objects.select_related('traveler', 'service')
    if service_id:
        queryset = queryset.filter(service_id=service_id)
    return queryset
