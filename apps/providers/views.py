from rest_framework import generics
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    ProviderFilterSerializer,
    ServiceProviderListSerializer,
    ServiceProviderSerializer,
    ProviderProfileUpdateSerializer,
)
from .services import get_provider, list_providers, update_provider_profile


class ProviderPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema(
    parameters=[
        OpenApiParameter('country', OpenApiTypes.STR, description='Filter by country'),
        OpenApiParameter('region', OpenApiTypes.STR, description='Filter by region'),
    ],
    description="Verified providers, best rated first.",
    tags=['providers'],
)
class ProviderListView(generics.ListAPIView):
    """GET /api/providers/"""

    serializer_class = ServiceProviderListSerializer
    permission_classes = [AllowAny]
    pagination_class = ProviderPagination

    def get_queryset(self):
        filters = ProviderFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        return list_providers(**filters.validated_data)


@extend_schema(
    responses={200: ServiceProviderSerializer},
    description="Provider profile with up to 10 active services.",
    tags=['providers'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def provider_detail(request, pk):
    provider = get_provider(provider_id=pk)
    return Response(ServiceProviderSerializer(provider).data)


@extend_schema(
    request=ProviderProfileUpdateSerializer,
    responses={200: ServiceProviderSerializer},
    description="Update the current provider's business profile. Blank fields are ignored.",
    tags=['providers'],
)
@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    serializer = ProviderProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    provider = update_provider_profile(user=request.user, **serializer.validated_data)
    return Response(ServiceProviderSerializer(provider).data)
