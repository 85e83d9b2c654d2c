from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.providers.services import get_provider_for_user
from .analytics import AnalyticsQueries
from .serializers import ProviderAnalyticsQuerySerializer, ProviderAnalyticsSerializer


@extend_schema(
    parameters=[
        OpenApiParameter(
            'time_range',
            OpenApiTypes.STR,
            description='Reporting window',
            enum=['7days', '30days', '90days', '1year'],
            default='30days',
        ),
    ],
    responses={200: ProviderAnalyticsSerializer},
    description="Revenue, bookings, customers and ratings for the current provider.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def provider_analytics(request):
    """Provider dashboard - thin HTTP handler."""
    query_serializer = ProviderAnalyticsQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    provider = get_provider_for_user(user=request.user)
    data = AnalyticsQueries.provider_analytics(
        provider.id,
        time_range=query_serializer.validated_data['time_range'],
    )
    return Response(ProviderAnalyticsSerializer(data).data)
