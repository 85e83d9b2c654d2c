"""Service layer tests for stories app."""

import pytest
from uuid import uuid4

from apps.stories.models import StoryComment, StoryLike, TravelerStory
from apps.stories.services import (
    create_story,
    list_stories,
    get_story,
    like_story,
    comment_on_story,
)
from apps.stories.services.exceptions import (
    DuplicateLikeError,
    InvalidStoryDataError,
    StoryNotFoundError,
)


@pytest.mark.django_db
class TestCreateStory:

    def test_new_story_awaits_approval(self, traveler):
        story = create_story(
            user=traveler,
            title='Serengeti migration',
            story='Watched the river crossing.',
            location='Serengeti',
            highlights=['Mara river'],
        )

        assert story.is_approved is False
        assert story.is_active is True
        assert story.highlights == ['Mara river']
        assert story not in list_stories()

    @pytest.mark.parametrize('missing', ['title', 'story', 'location'])
    def test_required_fields(self, traveler, missing):
        data = {'title': 'T', 'story': 'S', 'location': 'L'}
        data[missing] = '   '

        with pytest.raises(InvalidStoryDataError):
            create_story(user=traveler, **data)

    def test_highlights_must_be_list(self, traveler):
        with pytest.raises(InvalidStoryDataError):
            create_story(user=traveler, title='T', story='S', location='L', highlights='beach')


@pytest.mark.django_db
class TestListAndGetStory:

    def test_list_only_published(self, story, pending_story):
        TravelerStory.objects.create(
            user=story.user, title='Hidden', story='x', location='y', is_approved=True, is_active=False
        )

        assert list(list_stories()) == [story]

    def test_get_story_with_latest_comments(self, story, other_traveler):
        for i in range(25):
            StoryComment.objects.create(story=story, user=other_traveler, comment=f'Comment {i}')

        result = get_story(story_id=story.id)

        assert len(result.latest_comments) == 20

    def test_get_unapproved_story_not_found(self, pending_story):
        with pytest.raises(StoryNotFoundError):
            get_story(story_id=pending_story.id)

    def test_get_unknown_story(self, db):
        with pytest.raises(StoryNotFoundError):
            get_story(story_id=uuid4())


@pytest.mark.django_db
class TestLikeStory:

    def test_like_increments_counter(self, story, other_traveler):
        result = like_story(story_id=story.id, user=other_traveler)
        assert result.likes_count == 1

    def test_duplicate_like_conflicts(self, story, other_traveler):
        like_story(story_id=story.id, user=other_traveler)

        with pytest.raises(DuplicateLikeError):
            like_story(story_id=story.id, user=other_traveler)

        story.refresh_from_db()
        assert story.likes_count == 1
        assert StoryLike.objects.filter(story=story, user=other_traveler).count() == 1

    def test_like_pending_story_not_found(self, pending_story, other_traveler):
        with pytest.raises(StoryNotFoundError):
            like_story(story_id=pending_story.id, user=other_traveler)


@pytest.mark.django_db
class TestCommentOnStory:

    def test_comment_increments_counter(self, story, other_traveler):
        comment = comment_on_story(story_id=story.id, user=other_traveler, comment='  Epic!  ')

        story.refresh_from_db()
        assert comment.comment == 'Epic!'
        assert story.comments_count == 1

    def test_blank_comment_rejected(self, story, other_traveler):
        with pytest.raises(InvalidStoryDataError):
            comment_on_story(story_id=story.id, user=other_traveler, comment='   ')

        story.refresh_from_db()
        assert story.comments_count == 0
