# ==========================================
# apps/bookings/models.py
# ==========================================

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid

from apps.common.models import validate_choice_fields


class BookingStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    CONFIRMED = 'confirmed', 'Confirmed'
    CANCELLED = 'cancelled', 'Cancelled'
    COMPLETED = 'completed', 'Completed'


class BookingPaymentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PAID = 'paid', 'Paid'
    REFUNDED = 'refunded', 'Refunded'


# Statuses that count as a sale for revenue and activity
FULFILLED_STATUSES = (BookingStatus.CONFIRMED, BookingStatus.COMPLETED)


class Booking(models.Model):
    """A traveler's reservation of a service on a given date."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    traveler = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='bookings'
    )
    service = models.ForeignKey(
        'catalog.Service',
        on_delete=models.CASCADE,
        related_name='bookings'
    )
    # Copied from service.provider at creation, never changed afterwards
    provider = models.ForeignKey(
        'providers.ServiceProvider',
        on_delete=models.CASCADE,
        related_name='bookings'
    )

    booking_date = models.DateTimeField()
    start_time = models.CharField(max_length=20, blank=True)
    end_time = models.CharField(max_length=20, blank=True)
    participants = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    # price x participants, frozen at creation
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    status = models.CharField(
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.PENDING
    )
    payment_status = models.CharField(
        max_length=20,
        choices=BookingPaymentStatus.choices,
        default=BookingPaymentStatus.PENDING
    )
    special_requests = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bookings'
        indexes = [
            models.Index(fields=['traveler', '-created_at']),
            models.Index(fields=['provider', '-created_at']),
            models.Index(fields=['status', '-created_at']),
            models.Index(fields=['booking_date']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.traveler} - {self.service} ({self.status})"

    def save(self, *args, **kwargs):
        if self._state.adding and self.service.provider_id != self.provider_id:
            raise ValidationError({'provider': ['Booking provider must match the service provider.']})
        if self.participants is None or self.participants < 1:
            raise ValidationError({'participants': ['At least one participant is required.']})
        validate_choice_fields(self)
        super().save(*args, **kwargs)

    @property
    def is_terminal(self):
        return self.status in (BookingStatus.CANCELLED, BookingStatus.COMPLETED)
