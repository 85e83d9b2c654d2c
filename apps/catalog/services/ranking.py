"""Ranked views over promoted services (homepage slides, trending)."""

from django.db.models import QuerySet
from django.utils import timezone

from apps.catalog.models import PromotionType, Service
from .promotions import expire_lapsed_promotions


FEATURED_SLIDE_LOCATIONS = ('homepage', 'both', 'homepage_slides', 'top_carousel')
TRENDING_LOCATIONS = ('trending_section', 'increased_visibility', 'search_priority')

FEATURED_SLIDES_LIMIT = 5
TRENDING_LIMIT = 12


def get_featured_slides(limit: int = FEATURED_SLIDES_LIMIT) -> QuerySet:
    """
    Services for the homepage carousel.

    Only services with an open promotion window targeting a homepage
    surface, highest priority first, newest breaking ties.
    """
    now = timezone.now()
    expire_lapsed_promotions(now)

    return (
        Service.objects.active()
        .currently_featured(now)
        .filter(promotion_location__in=FEATURED_SLIDE_LOCATIONS)
        .select_related('provider')
        .order_by('-featured_priority', '-created_at')[:limit]
    )


def get_trending_services(limit: int = TRENDING_LIMIT) -> QuerySet:
    """
    Services promoted as trending on a trending surface.

    Ordered by priority, then views, then recency.
    """
    now = timezone.now()
    expire_lapsed_promotions(now)

    return (
        Service.objects.active()
        .currently_featured(now)
        .filter(
            promotion_type=PromotionType.TRENDING,
            promotion_location__in=TRENDING_LOCATIONS,
        )
        .select_related('provider')
        .order_by('-featured_priority', '-views_count', '-created_at')[:limit]
    )
