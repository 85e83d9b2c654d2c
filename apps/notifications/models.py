from django.db import models
import uuid

from apps.common.models import validate_choice_fields


class NotificationType(models.TextChoices):
    BOOKING_CREATED = 'booking_created', 'Booking Created'
    BOOKING_STATUS = 'booking_status', 'Booking Status Changed'
    PROMOTION = 'promotion', 'Promotion'
    SYSTEM = 'system', 'System'


class Notification(models.Model):
    """In-app message for a single user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='notifications'
    )
    type = models.CharField(max_length=30, choices=NotificationType.choices)
    title = models.CharField(max_length=200)
    message = models.TextField()
    data = models.JSONField(default=dict, blank=True)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['user', 'is_read', '-created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.title}"

    def save(self, *args, **kwargs):
        validate_choice_fields(self)
        super().save(*args, **kwargs)
