"""API tests for stories endpoints."""

import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestStoryEndpoints:

    def test_list_is_public(self, api_client, story, pending_story):
        response = api_client.get(reverse('stories:story-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['author_name'] == 'Amina K.'

    def test_create_story(self, traveler_client):
        response = traveler_client.post(
            reverse('stories:story-list'),
            {'title': 'Lake Manyara', 'story': 'Tree-climbing lions.', 'location': 'Manyara'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['is_approved'] is False

    def test_create_requires_auth(self, api_client):
        response = api_client.post(
            reverse('stories:story-list'),
            {'title': 'x', 'story': 'y', 'location': 'z'},
            format='json',
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_detail_includes_comments(self, api_client, story, other_traveler):
        from apps.stories.models import StoryComment

        StoryComment.objects.create(story=story, user=other_traveler, comment='Wow')

        response = api_client.get(reverse('stories:story-detail', args=[story.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['comments'][0]['comment'] == 'Wow'

    def test_like_twice_returns_conflict(self, other_traveler_client, story):
        url = reverse('stories:story-like', args=[story.id])

        first = other_traveler_client.post(url)
        second = other_traveler_client.post(url)

        assert first.status_code == status.HTTP_201_CREATED
        assert first.data['likes_count'] == 1
        assert second.status_code == status.HTTP_409_CONFLICT
        assert second.data['kind'] == 'conflict'

    def test_comment(self, other_traveler_client, story):
        response = other_traveler_client.post(
            reverse('stories:story-comment', args=[story.id]),
            {'comment': 'Adding this to my list'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['author_name'] == 'Lars B.'
