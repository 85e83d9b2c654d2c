from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    TravelerStorySerializer,
    TravelerStoryDetailSerializer,
    StoryCreateSerializer,
    StoryCommentSerializer,
    StoryCommentCreateSerializer,
)
from .services import create_story, list_stories, get_story, like_story, comment_on_story


class StoryPagination(PageNumberPagination):
    page_size = 12
    page_size_query_param = 'page_size'
    max_page_size = 50


class TravelerStoryViewSet(viewsets.GenericViewSet):
    """
    Traveler stories.

    list: Approved stories, newest first
    create: Submit a story for moderation
    retrieve: Story with its latest comments
    like: Like a story once
    comment: Comment on a story
    """

    serializer_class = TravelerStorySerializer
    pagination_class = StoryPagination
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(responses={200: TravelerStorySerializer(many=True)}, tags=['stories'])
    def list(self, request):
        queryset = list_stories()
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(TravelerStorySerializer(page, many=True).data)
        return Response(TravelerStorySerializer(queryset, many=True).data)

    @extend_schema(
        request=StoryCreateSerializer,
        responses={201: TravelerStorySerializer},
        description="Submit a story. It is published after moderator approval.",
        tags=['stories'],
    )
    def create(self, request):
        serializer = StoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        story = create_story(user=request.user, **serializer.validated_data)
        return Response(TravelerStorySerializer(story).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: TravelerStoryDetailSerializer}, tags=['stories'])
    def retrieve(self, request, pk=None):
        story = get_story(story_id=pk)
        return Response(TravelerStoryDetailSerializer(story).data)

    @extend_schema(
        request=None,
        responses={201: TravelerStorySerializer},
        description="Like a story. Liking twice returns a conflict.",
        tags=['stories'],
    )
    @action(detail=True, methods=['post'])
    def like(self, request, pk=None):
        story = like_story(story_id=pk, user=request.user)
        return Response(TravelerStorySerializer(story).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=StoryCommentCreateSerializer,
        responses={201: StoryCommentSerializer},
        tags=['stories'],
    )
    @action(detail=True, methods=['post'])
    def comment(self, request, pk=None):
        serializer = StoryCommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        created = comment_on_story(
            story_id=pk,
            user=request.user,
            comment=serializer.validated_data['comment'],
        )
        return Response(StoryCommentSerializer(created).data, status=status.HTTP_201_CREATED)
