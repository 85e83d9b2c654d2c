"""Service search - public catalog filtering and sorting."""

from decimal import Decimal
from typing import Optional

from django.db.models import Case, When, Value, F, IntegerField, Q, QuerySet
from django.utils import timezone

from apps.catalog.models import Service


SORT_ORDERS = {
    'price_asc': ('price',),
    'price_desc': ('-price',),
    'rating': ('-average_rating',),
    'popular': ('-bookings_count', '-views_count'),
    'newest': ('-created_at',),
}


def search_services(
    *,
    category: Optional[str] = None,
    location: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    search: Optional[str] = None,
    sort_by: Optional[str] = None
) -> QuerySet:
    """
    Search active services.

    - ``location`` matches any level of the location hierarchy.
    - ``search`` matches title, description or category.
    - Services with an open promotion window are listed first (higher
      priority first), then the requested sort; unknown sort keys fall
      back to newest.

    Returns:
        QuerySet of Service with provider pre-loaded
    """
    now = timezone.now()
    queryset = Service.objects.active().select_related('provider')

    if category:
        queryset = queryset.filter(category__iexact=category)

    if location:
        queryset = queryset.filter(
            Q(location__icontains=location) |
            Q(country__icontains=location) |
            Q(region__icontains=location) |
            Q(district__icontains=location) |
            Q(area__icontains=location)
        )

    if min_price is not None:
        queryset = queryset.filter(price__gte=min_price)
    if max_price is not None:
        queryset = queryset.filter(price__lte=max_price)

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(description__icontains=search) |
            Q(category__icontains=search)
        )

    promoted = Q(is_featured=True, featured_until__gt=now)
    queryset = queryset.annotate(
        promoted=Case(
            When(promoted, then=Value(1)),
            default=Value(0),
            output_field=IntegerField(),
        ),
        promoted_priority=Case(
            When(promoted, then=F('featured_priority')),
            default=Value(0),
            output_field=IntegerField(),
        ),
    )

    order = SORT_ORDERS.get(sort_by, SORT_ORDERS['newest'])
    return queryset.order_by('-promoted', '-promoted_priority', *order)
