"""Services for notifications business logic."""

from .exceptions import NotificationNotFoundError
from .notification_management import (
    notify,
    list_notifications,
    mark_read,
    mark_all_read,
)

__all__ = [
    # Exceptions
    'NotificationNotFoundError',
    # Services
    'notify',
    'list_notifications',
    'mark_read',
    'mark_all_read',
]
