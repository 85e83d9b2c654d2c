"""Rating aggregation for services and providers."""

from decimal import Decimal, ROUND_HALF_UP
from uuid import UUID

from django.db import transaction
from django.db.models import Avg

from apps.catalog.models import Service
from apps.providers.models import ServiceProvider
from apps.reviews.models import Review


def _two_places(value) -> Decimal:
    if value is None:
        return Decimal('0.00')
    return Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


@transaction.atomic
def update_service_rating(*, service_id: UUID) -> Decimal:
    """
    Recalculate ``Service.average_rating`` from its reviews.

    The service row is locked so concurrent reviews serialize.
    """
    Service.objects.select_for_update().filter(id=service_id).first()
    avg = Review.objects.filter(service_id=service_id).aggregate(avg=Avg('rating'))['avg']
    rating = _two_places(avg)
    Service.objects.filter(id=service_id).update(average_rating=rating)
    return rating


@transaction.atomic
def update_provider_rating(*, provider_id: UUID) -> Decimal:
    """Recalculate ``ServiceProvider.rating`` across all its reviews."""
    ServiceProvider.objects.select_for_update().filter(id=provider_id).first()
    avg = Review.objects.filter(provider_id=provider_id).aggregate(avg=Avg('rating'))['avg']
    rating = _two_places(avg)
    ServiceProvider.objects.filter(id=provider_id).update(rating=rating)
    return rating
