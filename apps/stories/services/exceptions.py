"""Domain exceptions for stories app."""

from apps.common.exceptions import ConflictError, DomainValidationError, NotFoundError


class StoryNotFoundError(NotFoundError):
    """Story doesn't exist or isn't published."""
    default_message = 'Story not found'


class InvalidStoryDataError(DomainValidationError):
    default_message = 'Invalid story data'


class DuplicateLikeError(ConflictError):
    default_message = 'You have already liked this story'
