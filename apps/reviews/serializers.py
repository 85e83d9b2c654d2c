from rest_framework import serializers

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    """Review with a short traveler name."""

    traveler_name = serializers.SerializerMethodField()
    service_title = serializers.CharField(source='service.title', read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'booking',
            'service',
            'service_title',
            'traveler',
            'traveler_name',
            'rating',
            'comment',
            'created_at',
        ]
        read_only_fields = fields

    def get_traveler_name(self, obj):
        return obj.traveler.get_display_name()


class ReviewCreateSerializer(serializers.Serializer):
    service_id = serializers.UUIDField()
    booking_id = serializers.UUIDField(required=False, allow_null=True)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(required=False, allow_blank=True, default='')


class ReviewFilterSerializer(serializers.Serializer):
    service = serializers.UUIDField(required=False)
