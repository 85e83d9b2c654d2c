"""
Serializers for analytics app.

Input Serializers:
    ProviderAnalyticsQuerySerializer - Validates the reporting window

Response Serializers:
    ProviderAnalyticsSerializer - Provider dashboard
"""

from rest_framework import serializers

from .analytics import TIME_RANGES


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class ProviderAnalyticsQuerySerializer(serializers.Serializer):
    """
    Query Parameters:
        time_range (str): 7days, 30days, 90days or 1year
    """

    time_range = serializers.ChoiceField(
        choices=list(TIME_RANGES),
        default='30days',
        help_text='Reporting window',
    )


# =============================================================================
# Response Serializers
# =============================================================================

class MetricSerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    growth = serializers.FloatField()
    trend = serializers.ChoiceField(choices=['up', 'down', 'neutral'])


class CountMetricSerializer(MetricSerializer):
    total = serializers.IntegerField()


class RatingMetricSerializer(serializers.Serializer):
    average = serializers.FloatField()
    total = serializers.IntegerField()
    growth = serializers.FloatField()
    trend = serializers.CharField()


class TopServiceSerializer(serializers.Serializer):
    name = serializers.CharField()
    bookings = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    rating = serializers.FloatField()


class TopCountrySerializer(serializers.Serializer):
    country = serializers.CharField()
    bookings = serializers.IntegerField()
    percentage = serializers.IntegerField()


class MonthlyDataSerializer(serializers.Serializer):
    month = serializers.CharField()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    bookings = serializers.IntegerField()


class ProviderAnalyticsSerializer(serializers.Serializer):
    """Provider dashboard figures."""

    revenue = MetricSerializer()
    bookings = CountMetricSerializer()
    customers = CountMetricSerializer()
    rating = RatingMetricSerializer()
    top_services = TopServiceSerializer(many=True)
    top_countries = TopCountrySerializer(many=True)
    monthly_data = MonthlyDataSerializer(many=True)
