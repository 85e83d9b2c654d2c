# ==========================================
# apps/catalog/models.py
# ==========================================

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal
import uuid

from apps.common.models import validate_choice_fields


def default_currency():
    return settings.DEFAULT_CURRENCY


class PromotionType(models.TextChoices):
    FEATURED = 'featured', 'Featured'
    TRENDING = 'trending', 'Trending'
    SEARCH_BOOST = 'search_boost', 'Search Boost'
    NONE = 'none', 'None'


class ServiceQuerySet(models.QuerySet):

    def active(self):
        return self.filter(is_active=True)

    def currently_featured(self, now=None):
        """Featured flag set and the promotion window still open."""
        now = now or timezone.now()
        return self.filter(is_featured=True, featured_until__gt=now)

    def lapsed_promotions(self, now=None):
        """Featured flag still set although the window has closed."""
        now = now or timezone.now()
        return self.filter(is_featured=True).filter(
            models.Q(featured_until__lte=now) | models.Q(featured_until__isnull=True)
        )


class Service(models.Model):
    """A bookable offering listed by a service provider."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    provider = models.ForeignKey(
        'providers.ServiceProvider',
        on_delete=models.CASCADE,
        related_name='services',
    )

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True, db_index=True)
    subcategory = models.CharField(max_length=100, blank=True)

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
    )
    currency = models.CharField(max_length=3, default=default_currency)
    duration = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        help_text='Duration in hours',
    )
    max_participants = models.PositiveIntegerField(null=True, blank=True)

    # Location hierarchy
    location = models.CharField(max_length=200, blank=True)
    country = models.CharField(max_length=100, blank=True)
    region = models.CharField(max_length=100, blank=True)
    district = models.CharField(max_length=100, blank=True)
    area = models.CharField(max_length=100, blank=True)

    images = models.JSONField(default=list, blank=True)
    amenities = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)

    # Promotion state (mirrors the latest ServicePromotion)
    is_featured = models.BooleanField(default=False)
    featured_until = models.DateTimeField(null=True, blank=True)
    featured_priority = models.PositiveIntegerField(default=0)
    promotion_type = models.CharField(
        max_length=20,
        choices=PromotionType.choices,
        default=PromotionType.NONE,
    )
    promotion_location = models.CharField(max_length=50, blank=True)

    # Counters
    views_count = models.PositiveIntegerField(default=0)
    bookings_count = models.PositiveIntegerField(default=0)
    average_rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ServiceQuerySet.as_manager()

    class Meta:
        db_table = 'services'
        indexes = [
            models.Index(fields=['category', 'is_active']),
            models.Index(fields=['is_featured', 'featured_until']),
            models.Index(fields=['promotion_type', 'promotion_location']),
            models.Index(fields=['country', 'region', 'district']),
            models.Index(fields=['price']),
            models.Index(fields=['-average_rating']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        validate_choice_fields(self)
        super().save(*args, **kwargs)

    def is_promoted(self, now=None):
        now = now or timezone.now()
        return bool(self.is_featured and self.featured_until and self.featured_until > now)


class ServicePromotion(models.Model):
    """
    Append-only ledger of paid promotions.

    Rows are never updated; the service's promotion fields are derived
    from the most recent entry.
    """

    LEDGER_TYPES = [
        (PromotionType.FEATURED, 'Featured'),
        (PromotionType.TRENDING, 'Trending'),
        (PromotionType.SEARCH_BOOST, 'Search Boost'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    service = models.ForeignKey(Service, on_delete=models.CASCADE, related_name='promotions')
    promotion_type = models.CharField(max_length=20, choices=LEDGER_TYPES)
    promotion_location = models.CharField(max_length=50, blank=True)
    duration_days = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    cost = models.DecimalField(max_digits=12, decimal_places=2)
    payment_method = models.CharField(max_length=50, blank=True)
    payment_reference = models.CharField(max_length=100, blank=True)
    started_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'service_promotions'
        indexes = [
            models.Index(fields=['service', '-created_at']),
            models.Index(fields=['expires_at']),
            models.Index(fields=['promotion_type']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.service} - {self.promotion_type} until {self.expires_at:%Y-%m-%d}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError('Promotion records are immutable once created.')
        validate_choice_fields(self)
        super().save(*args, **kwargs)
