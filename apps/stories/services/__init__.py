"""
Stories services - Business logic layer.

- Story submission and listing
- Likes and comments
"""

from .story_management import (
    create_story,
    list_stories,
    get_story,
    like_story,
    comment_on_story,
)

from .exceptions import (
    StoryNotFoundError,
    InvalidStoryDataError,
    DuplicateLikeError,
)

__all__ = [
    'create_story',
    'list_stories',
    'get_story',
    'like_story',
    'comment_on_story',
    'StoryNotFoundError',
    'InvalidStoryDataError',
    'DuplicateLikeError',
]
