# ==========================================
# apps/providers/models.py
# ==========================================

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from decimal import Decimal
import uuid


class ServiceProvider(models.Model):
    """Business profile attached to a ``service_provider`` user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='provider_profile',
    )
    business_name = models.CharField(max_length=200)
    business_type = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)

    # Location hierarchy
    location = models.CharField(max_length=200, blank=True)
    country = models.CharField(max_length=100, blank=True)
    region = models.CharField(max_length=100, blank=True)
    district = models.CharField(max_length=100, blank=True)
    area = models.CharField(max_length=100, blank=True)

    license_number = models.CharField(max_length=100, blank=True)

    # Aggregates
    rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    total_bookings = models.PositiveIntegerField(default=0)

    is_verified = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'service_providers'
        indexes = [
            models.Index(fields=['-rating', '-total_bookings']),
            models.Index(fields=['country', 'region']),
        ]
        ordering = ['-rating', '-total_bookings']

    def __str__(self):
        return self.business_name
