from rest_framework import serializers

from .models import Booking, BookingStatus


# =============================================================================
# Input Serializers
# =============================================================================

class BookingCreateSerializer(serializers.Serializer):
    service_id = serializers.UUIDField()
    booking_date = serializers.CharField(help_text='ISO-8601 date or datetime')
    participants = serializers.IntegerField(min_value=1, default=1)
    start_time = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    end_time = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    special_requests = serializers.CharField(required=False, allow_blank=True, default='')


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class BookingFilterSerializer(serializers.Serializer):
    """
    Query Parameters:
        status (str): pending | confirmed | cancelled | completed
    """

    status = serializers.ChoiceField(choices=BookingStatus.choices, required=False)


class RecentActivityQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=50, default=10)


# =============================================================================
# Output Serializers
# =============================================================================

class BookingSerializer(serializers.ModelSerializer):
    service_title = serializers.CharField(source='service.title', read_only=True)
    business_name = serializers.CharField(source='provider.business_name', read_only=True)
    traveler_name = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = [
            'id',
            'traveler',
            'traveler_name',
            'service',
            'service_title',
            'provider',
            'business_name',
            'booking_date',
            'start_time',
            'end_time',
            'participants',
            'total_amount',
            'status',
            'payment_status',
            'special_requests',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_traveler_name(self, obj) -> str:
        return obj.traveler.get_full_name()


class ActivitySerializer(serializers.Serializer):
    id = serializers.CharField()
    type = serializers.CharField()
    user = serializers.CharField()
    action = serializers.CharField()
    location = serializers.CharField()
    category = serializers.CharField()
    timestamp = serializers.DateTimeField()


class ActivityStatsSerializer(serializers.Serializer):
    weeklyBookings = serializers.IntegerField()
    activeTravelers = serializers.IntegerField()
    destinations = serializers.IntegerField()
    totalServices = serializers.IntegerField()


class RecentActivitySerializer(serializers.Serializer):
    activities = ActivitySerializer(many=True)
    stats = ActivityStatsSerializer()
