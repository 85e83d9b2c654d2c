"""
Error taxonomy shared by every app.

These are plain exceptions raised by the service layer, separate from HTTP
concerns. Each class carries a stable ``kind`` clients switch on. Apps
subclass them in their own ``services/exceptions.py`` with domain names,
e.g.::

    class BookingNotFoundError(NotFoundError):
        default_message = 'Booking not found'

``apps.common.handlers.exception_handler`` maps the kind to an HTTP status
and renders ``{"error": <message>, "kind": <kind>}``.

Exception Hierarchy:
    DomainError (base)
    ├── DomainValidationError   validation_error
    ├── NotAuthenticatedError   not_authenticated
    ├── NotFoundError           not_found
    ├── ForbiddenError          forbidden
    ├── InvalidTransitionError  invalid_transition
    ├── ConflictError           conflict
    └── StoreError              store_error
"""


class DomainError(Exception):
    """Base exception for all marketplace domain errors."""

    kind = 'domain_error'
    default_message = 'Request could not be processed.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DomainValidationError(DomainError):
    """Input violates a business rule."""

    kind = 'validation_error'
    default_message = 'Invalid input.'


class NotAuthenticatedError(DomainError):
    """Caller could not be identified."""

    kind = 'not_authenticated'
    default_message = 'Authentication failed.'


class NotFoundError(DomainError):
    """Entity does not exist or is not visible to the caller."""

    kind = 'not_found'
    default_message = 'Not found.'


class ForbiddenError(DomainError):
    """Caller is authenticated but not allowed to do this."""

    kind = 'forbidden'
    default_message = 'You do not have permission to perform this action.'


class InvalidTransitionError(DomainError):
    """Requested state change is not allowed from the current state."""

    kind = 'invalid_transition'
    default_message = 'Invalid status transition.'


class ConflictError(DomainError):
    """Write collides with existing state (duplicate, unique key)."""

    kind = 'conflict'
    default_message = 'Resource already exists.'


class StoreError(DomainError):
    """The database failed to serve the request."""

    kind = 'store_error'
    default_message = 'Storage is temporarily unavailable.'
