"""Domain exceptions for notifications app."""

from apps.common.exceptions import NotFoundError


class NotificationNotFoundError(NotFoundError):
    """Notification does not exist or belongs to another user."""
    default_message = 'Notification not found'
