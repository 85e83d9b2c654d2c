"""
Reviews services - Business logic layer.

- Review creation and listing
- Service and provider rating aggregation
"""

from .review_management import (
    create_review,
    list_service_reviews,
)

from .rating_aggregation import (
    update_service_rating,
    update_provider_rating,
)

from .exceptions import (
    InvalidRatingError,
    ReviewedServiceNotFoundError,
    ReviewBookingNotFoundError,
    ReviewForbiddenError,
    DuplicateReviewError,
)

__all__ = [
    'create_review',
    'list_service_reviews',
    'update_service_rating',
    'update_provider_rating',
    'InvalidRatingError',
    'ReviewedServiceNotFoundError',
    'ReviewBookingNotFoundError',
    'ReviewForbiddenError',
    'DuplicateReviewError',
]
