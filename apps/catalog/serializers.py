from rest_framework import serializers

from .models import PromotionType, Service, ServicePromotion
from .services.promotions import MAX_PROMOTION_DAYS
from .services.service_search import SORT_ORDERS


# =============================================================================
# Input Serializers
# =============================================================================

class ServiceSearchSerializer(serializers.Serializer):
    """
    Validate query parameters for the public catalog.

    Query Parameters:
        category (str): Exact category (case-insensitive)
        location (str): Matches any level of the location hierarchy
        min_price / max_price (decimal): Price bounds
        search (str): Free text over title, description, category
        sort_by (str): price_asc | price_desc | rating | popular | newest
    """

    category = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    min_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, min_value=0)
    max_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, min_value=0)
    search = serializers.CharField(required=False, allow_blank=True)
    sort_by = serializers.ChoiceField(choices=list(SORT_ORDERS), required=False)

    def validate(self, attrs):
        min_price = attrs.get('min_price')
        max_price = attrs.get('max_price')
        if min_price is not None and max_price is not None and min_price > max_price:
            raise serializers.ValidationError({
                'max_price': 'Maximum price must be greater than minimum price'
            })
        return attrs


class ServiceWriteSerializer(serializers.Serializer):
    """Fields a provider may set on a service."""

    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    subcategory = serializers.CharField(max_length=100, required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True)
    duration = serializers.DecimalField(max_digits=6, decimal_places=2, required=False, allow_null=True)
    max_participants = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    region = serializers.CharField(max_length=100, required=False, allow_blank=True)
    district = serializers.CharField(max_length=100, required=False, allow_blank=True)
    area = serializers.CharField(max_length=100, required=False, allow_blank=True)
    images = serializers.ListField(child=serializers.CharField(), required=False)
    amenities = serializers.ListField(child=serializers.CharField(), required=False)


class PromoteServiceSerializer(serializers.Serializer):
    promotion_type = serializers.ChoiceField(choices=[
        PromotionType.FEATURED,
        PromotionType.TRENDING,
        PromotionType.SEARCH_BOOST,
    ])
    duration_days = serializers.IntegerField(min_value=1, max_value=MAX_PROMOTION_DAYS, default=30)
    location = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    payment_method = serializers.CharField(max_length=50, required=False, default='demo')
    payment_reference = serializers.CharField(max_length=100, required=False, allow_null=True, default=None)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True, default=None)


# =============================================================================
# Output Serializers
# =============================================================================

class ServiceSerializer(serializers.ModelSerializer):
    """Catalog row enriched with provider name and rating."""

    business_name = serializers.CharField(source='provider.business_name', read_only=True)
    provider_rating = serializers.DecimalField(
        source='provider.rating', max_digits=3, decimal_places=2, read_only=True
    )
    is_promoted = serializers.SerializerMethodField()

    class Meta:
        model = Service
        fields = [
            'id',
            'provider',
            'business_name',
            'provider_rating',
            'title',
            'description',
            'category',
            'subcategory',
            'price',
            'currency',
            'duration',
            'max_participants',
            'location',
            'country',
            'region',
            'district',
            'area',
            'images',
            'amenities',
            'is_active',
            'is_featured',
            'featured_until',
            'featured_priority',
            'promotion_type',
            'promotion_location',
            'is_promoted',
            'views_count',
            'bookings_count',
            'average_rating',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_is_promoted(self, obj) -> bool:
        return obj.is_promoted()


class ServiceDetailSerializer(ServiceSerializer):
    """Single service with provider contact details."""

    provider_location = serializers.CharField(source='provider.location', read_only=True)
    provider_first_name = serializers.CharField(source='provider.user.first_name', read_only=True)
    provider_last_name = serializers.CharField(source='provider.user.last_name', read_only=True)
    provider_email = serializers.EmailField(source='provider.user.email', read_only=True)
    provider_phone = serializers.CharField(source='provider.user.phone', read_only=True)

    class Meta(ServiceSerializer.Meta):
        fields = ServiceSerializer.Meta.fields + [
            'provider_location',
            'provider_first_name',
            'provider_last_name',
            'provider_email',
            'provider_phone',
        ]
        read_only_fields = fields


class ServicePromotionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ServicePromotion
        fields = [
            'id',
            'service',
            'promotion_type',
            'promotion_location',
            'duration_days',
            'cost',
            'payment_method',
            'payment_reference',
            'started_at',
            'expires_at',
            'created_at',
        ]
        read_only_fields = fields
