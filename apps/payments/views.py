from rest_framework import generics
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import PaymentSerializer, PaymentFilterSerializer
from .services import get_user_payments


class PaymentPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema(
    parameters=[
        OpenApiParameter('payment_type', OpenApiTypes.STR, description='Filter by payment type'),
        OpenApiParameter('payment_status', OpenApiTypes.STR, description='Filter by payment status'),
    ],
    description="List the current user's payments, newest first.",
    tags=['payments'],
)
class PaymentListView(generics.ListAPIView):
    """GET /api/payments/"""

    serializer_class = PaymentSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PaymentPagination

    def get_queryset(self):
        filters = PaymentFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        return get_user_payments(user=self.request.user, **filters.validated_data)
