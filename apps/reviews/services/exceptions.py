"""Domain exceptions for reviews app."""

from apps.common.exceptions import (
    ConflictError,
    DomainValidationError,
    ForbiddenError,
    NotFoundError,
)


class InvalidRatingError(DomainValidationError):
    """Rating is outside 1-5."""
    default_message = 'Rating must be between 1 and 5'


class ReviewedServiceNotFoundError(NotFoundError):
    default_message = 'Service not found'


class ReviewBookingNotFoundError(NotFoundError):
    default_message = 'Booking not found'


class ReviewForbiddenError(ForbiddenError):
    """Caller may not review this service or booking."""
    default_message = 'You cannot review this service'


class DuplicateReviewError(ConflictError):
    """Booking has already been reviewed."""
    default_message = 'This booking has already been reviewed'
