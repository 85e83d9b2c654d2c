from rest_framework import serializers

from .models import TravelerStory, StoryComment


class StoryAuthorMixin(serializers.Serializer):
    author_name = serializers.SerializerMethodField()
    author_avatar = serializers.CharField(source='user.avatar_url', read_only=True)

    def get_author_name(self, obj):
        return obj.user.get_display_name()


class StoryCommentSerializer(StoryAuthorMixin, serializers.ModelSerializer):
    class Meta:
        model = StoryComment
        fields = ['id', 'author_name', 'author_avatar', 'comment', 'created_at']
        read_only_fields = fields


class TravelerStorySerializer(StoryAuthorMixin, serializers.ModelSerializer):
    """Story card for listings."""

    class Meta:
        model = TravelerStory
        fields = [
            'id',
            'author_name',
            'author_avatar',
            'title',
            'story',
            'location',
            'duration',
            'highlights',
            'media',
            'is_approved',
            'likes_count',
            'comments_count',
            'created_at',
        ]
        read_only_fields = fields


class TravelerStoryDetailSerializer(TravelerStorySerializer):
    comments = StoryCommentSerializer(source='latest_comments', many=True, read_only=True)

    class Meta(TravelerStorySerializer.Meta):
        fields = TravelerStorySerializer.Meta.fields + ['comments']
        read_only_fields = fields


class StoryCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    story = serializers.CharField()
    location = serializers.CharField(max_length=200)
    duration = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    highlights = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    media = serializers.ListField(child=serializers.CharField(), required=False, default=list)


class StoryCommentCreateSerializer(serializers.Serializer):
    comment = serializers.CharField()
