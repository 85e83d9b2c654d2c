from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal
import uuid

from apps.common.models import validate_choice_fields


class PaymentType(models.TextChoices):
    PREMIUM_MEMBERSHIP = 'premium_membership', 'Premium Membership'
    FEATURED_SERVICE = 'featured_service', 'Featured Service'
    BOOKING_PAYMENT = 'booking_payment', 'Booking Payment'


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'
    FAILED = 'failed', 'Failed'
    REFUNDED = 'refunded', 'Refunded'


def default_currency():
    return settings.DEFAULT_CURRENCY


class Payment(models.Model):
    """Money movement recorded by the marketplace (promotions, memberships, bookings)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='payments'
    )
    provider = models.ForeignKey(
        'providers.ServiceProvider',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payments'
    )
    service = models.ForeignKey(
        'catalog.Service',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payments'
    )

    payment_type = models.CharField(max_length=30, choices=PaymentType.choices)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    currency = models.CharField(max_length=3, default=default_currency)
    payment_method = models.CharField(max_length=50, blank=True)
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING
    )
    transaction_id = models.CharField(max_length=100, blank=True, db_index=True)
    description = models.TextField(blank=True)

    # Validity window for time-boxed purchases
    valid_from = models.DateTimeField(default=timezone.now)
    valid_until = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payments'
        indexes = [
            models.Index(fields=['user', '-created_at']),
            models.Index(fields=['payment_type', 'payment_status']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.get_payment_type_display()} {self.amount} {self.currency} ({self.payment_status})"

    def save(self, *args, **kwargs):
        validate_choice_fields(self)
        super().save(*args, **kwargs)
