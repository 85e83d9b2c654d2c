"""Notification creation and inbox management."""

import logging
from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.accounts.models import User
from apps.notifications.models import Notification
from .exceptions import NotificationNotFoundError

logger = logging.getLogger(__name__)


def notify(
    *,
    user: User,
    type: str,
    title: str,
    message: str,
    data: Optional[dict] = None
) -> Notification:
    """Create a notification for ``user``."""
    notification = Notification.objects.create(
        user=user,
        type=type,
        title=title,
        message=message,
        data=data or {},
    )
    logger.debug("Notification %s (%s) sent to user %s", notification.id, type, user.id)
    return notification


def list_notifications(*, user: User, unread_only: bool = False) -> QuerySet:
    queryset = Notification.objects.filter(user=user)
    if unread_only:
        queryset = queryset.filter(is_read=False)
    return queryset.order_by('-created_at')


def mark_read(*, notification_id: UUID, user: User) -> Notification:
    """
    Mark one of the caller's notifications as read.

    Raises:
        NotificationNotFoundError: If missing or owned by someone else
    """
    try:
        notification = Notification.objects.get(id=notification_id, user=user)
    except Notification.DoesNotExist:
        raise NotificationNotFoundError()

    if not notification.is_read:
        notification.is_read = True
        notification.save(update_fields=['is_read'])
    return notification


def mark_all_read(*, user: User) -> int:
    """Mark every unread notification of ``user`` as read; returns the count."""
    return Notification.objects.filter(user=user, is_read=False).update(is_read=True)
