# ==========================================
# apps/reviews/models.py
# ==========================================

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
import uuid


class Review(models.Model):
    """Traveler rating of a service, optionally tied to a booking."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    booking = models.OneToOneField(
        'bookings.Booking',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='review',
    )
    traveler = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    service = models.ForeignKey('catalog.Service', on_delete=models.CASCADE, related_name='reviews')
    provider = models.ForeignKey(
        'providers.ServiceProvider',
        on_delete=models.CASCADE,
        related_name='reviews',
    )
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['service', '-created_at']),
            models.Index(fields=['provider', 'rating']),
            models.Index(fields=['traveler', '-created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.traveler.get_display_name()} - {self.service.title} ({self.rating}★)"
