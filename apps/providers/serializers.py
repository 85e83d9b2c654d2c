from rest_framework import serializers

from apps.catalog.models import Service
from .models import ServiceProvider


class ProviderFilterSerializer(serializers.Serializer):
    """Query parameters for the provider directory."""

    country = serializers.CharField(required=False, allow_blank=True)
    region = serializers.CharField(required=False, allow_blank=True)


class ProviderServiceSummarySerializer(serializers.ModelSerializer):
    """Compact service row shown on a provider page."""

    class Meta:
        model = Service
        fields = ['id', 'title', 'category', 'price', 'currency', 'location', 'images', 'average_rating']
        read_only_fields = fields


class ServiceProviderListSerializer(serializers.ModelSerializer):
    first_name = serializers.CharField(source='user.first_name', read_only=True)
    last_name = serializers.CharField(source='user.last_name', read_only=True)

    class Meta:
        model = ServiceProvider
        fields = [
            'id',
            'business_name',
            'business_type',
            'location',
            'country',
            'region',
            'rating',
            'total_bookings',
            'is_verified',
            'first_name',
            'last_name',
        ]
        read_only_fields = fields


class ServiceProviderSerializer(serializers.ModelSerializer):
    """Full provider profile with contact details and a few active services."""

    first_name = serializers.CharField(source='user.first_name', read_only=True)
    last_name = serializers.CharField(source='user.last_name', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    phone = serializers.CharField(source='user.phone', read_only=True)
    avatar_url = serializers.CharField(source='user.avatar_url', read_only=True)
    services = serializers.SerializerMethodField()

    class Meta:
        model = ServiceProvider
        fields = [
            'id',
            'business_name',
            'business_type',
            'description',
            'location',
            'country',
            'region',
            'district',
            'area',
            'license_number',
            'rating',
            'total_bookings',
            'is_verified',
            'first_name',
            'last_name',
            'email',
            'phone',
            'avatar_url',
            'services',
            'created_at',
        ]
        read_only_fields = fields

    def get_services(self, obj):
        services = obj.services.filter(is_active=True).order_by('-created_at')[:10]
        return ProviderServiceSummarySerializer(services, many=True).data


class ProviderProfileUpdateSerializer(serializers.Serializer):
    business_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    business_type = serializers.CharField(max_length=100, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    region = serializers.CharField(max_length=100, required=False, allow_blank=True)
    district = serializers.CharField(max_length=100, required=False, allow_blank=True)
    area = serializers.CharField(max_length=100, required=False, allow_blank=True)
    license_number = serializers.CharField(max_length=100, required=False, allow_blank=True)
