import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone

from apps.catalog.models import PromotionType, Service


@pytest.fixture
def make_service(provider):
    """Factory for services of ``provider``."""

    def _make(title='Service', price='50.00', **fields):
        return Service.objects.create(provider=provider, title=title, price=Decimal(price), **fields)

    return _make


@pytest.fixture
def lapsed_featured_service(make_service):
    """Still flagged featured although the window closed yesterday."""
    return make_service(
        title='Lapsed Promo',
        is_featured=True,
        featured_until=timezone.now() - timedelta(days=1),
        featured_priority=9,
        promotion_type=PromotionType.TRENDING,
        promotion_location='both',
    )
