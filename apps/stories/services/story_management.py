"""Traveler stories: publishing, likes and comments."""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import F, QuerySet

from apps.accounts.models import User
from apps.stories.models import StoryComment, StoryLike, TravelerStory
from .exceptions import DuplicateLikeError, InvalidStoryDataError, StoryNotFoundError

logger = logging.getLogger(__name__)


LATEST_COMMENTS_LIMIT = 20


def _clean_list(value, field: str) -> list:
    if value in (None, ''):
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidStoryDataError(f"{field} must be a list")
    return list(value)


def _get_published_story(story_id: UUID) -> TravelerStory:
    try:
        return TravelerStory.objects.published().get(id=story_id)
    except (TravelerStory.DoesNotExist, ValidationError):
        raise StoryNotFoundError()


def create_story(
    *,
    user: User,
    title: str,
    story: str,
    location: str,
    duration: str = '',
    highlights: Optional[list] = None,
    media: Optional[list] = None
) -> TravelerStory:
    """
    Submit a story. It stays hidden until a moderator approves it.

    Raises:
        InvalidStoryDataError: title, story or location missing
    """
    title = (title or '').strip()
    body = (story or '').strip()
    location = (location or '').strip()
    if not title or not body or not location:
        raise InvalidStoryDataError('Title, story and location are required')

    created = TravelerStory.objects.create(
        user=user,
        title=title,
        story=body,
        location=location,
        duration=duration or '',
        highlights=_clean_list(highlights, 'Highlights'),
        media=_clean_list(media, 'Media'),
        is_approved=False,
    )
    logger.info("Story %s submitted by user %s", created.id, user.pk)
    return created


def list_stories() -> QuerySet:
    """Approved, active stories newest first."""
    return TravelerStory.objects.published().select_related('user')


def get_story(*, story_id: UUID) -> TravelerStory:
    """
    Published story with its latest comments.

    The comments are attached as ``latest_comments``, newest first.
    """
    story = _get_published_story(story_id)
    story.latest_comments = list(
        story.comments.select_related('user').order_by('-created_at')[:LATEST_COMMENTS_LIMIT]
    )
    return story


@transaction.atomic
def like_story(*, story_id: UUID, user: User) -> TravelerStory:
    """
    Like a story once.

    Raises:
        StoryNotFoundError: Story doesn't exist or isn't published
        DuplicateLikeError: User already liked it
    """
    story = _get_published_story(story_id)

    try:
        with transaction.atomic():
            StoryLike.objects.create(story=story, user=user)
    except IntegrityError:
        raise DuplicateLikeError()

    TravelerStory.objects.filter(id=story.id).update(likes_count=F('likes_count') + 1)
    story.refresh_from_db(fields=['likes_count'])
    return story


@transaction.atomic
def comment_on_story(*, story_id: UUID, user: User, comment: str) -> StoryComment:
    """
    Add a comment to a published story.

    Raises:
        InvalidStoryDataError: Comment is blank
        StoryNotFoundError: Story doesn't exist or isn't published
    """
    text = (comment or '').strip()
    if not text:
        raise InvalidStoryDataError('Comment cannot be empty')

    story = _get_published_story(story_id)
    created = StoryComment.objects.create(story=story, user=user, comment=text)
    TravelerStory.objects.filter(id=story.id).update(comments_count=F('comments_count') + 1)
    return created
