from rest_framework import serializers

from .models import Payment, PaymentType, PaymentStatus


class PaymentFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for payment listing.

    Query Parameters:
        payment_type (str): premium_membership | featured_service | booking_payment
        payment_status (str): pending | completed | failed | refunded
    """

    payment_type = serializers.ChoiceField(choices=PaymentType.choices, required=False)
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices, required=False)


class PaymentSerializer(serializers.ModelSerializer):
    service_title = serializers.CharField(source='service.title', read_only=True, default=None)

    class Meta:
        model = Payment
        fields = [
            'id',
            'payment_type',
            'amount',
            'currency',
            'payment_method',
            'payment_status',
            'transaction_id',
            'description',
            'service',
            'service_title',
            'valid_from',
            'valid_until',
            'created_at',
        ]
        read_only_fields = fields
