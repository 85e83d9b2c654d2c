from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    ServiceSearchSerializer,
    ServiceWriteSerializer,
    PromoteServiceSerializer,
    ServiceSerializer,
    ServiceDetailSerializer,
    ServicePromotionSerializer,
)
from .services import (
    create_service,
    update_service,
    delete_service,
    toggle_service_status,
    get_service,
    get_provider_services,
    search_services,
    promote_service,
    get_featured_slides,
    get_trending_services,
)


class ServicePagination(PageNumberPagination):
    """Custom pagination for the service catalog."""
    page_size = 10
    page_size_query_param = 'page_size'
    max_page_size = 100


class ServiceViewSet(viewsets.GenericViewSet):
    """
    Service catalog.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Search active services (promoted first)
    create: Create a service (providers only)
    retrieve: Get a service and count the view
    update / partial_update: Edit a service (owner only)
    destroy: Delete a service (owner only)
    """

    serializer_class = ServiceSerializer
    pagination_class = ServicePagination
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        """Catalog reads are public; everything else needs a login."""
        if self.action in ['list', 'retrieve', 'featured_slides', 'trending']:
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[
            OpenApiParameter('category', OpenApiTypes.STR),
            OpenApiParameter('location', OpenApiTypes.STR),
            OpenApiParameter('min_price', OpenApiTypes.DECIMAL),
            OpenApiParameter('max_price', OpenApiTypes.DECIMAL),
            OpenApiParameter('search', OpenApiTypes.STR),
            OpenApiParameter('sort_by', OpenApiTypes.STR, description='price_asc | price_desc | rating | popular | newest'),
        ],
        responses={200: ServiceSerializer(many=True)},
        tags=['services'],
    )
    def list(self, request):
        filters = ServiceSearchSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = search_services(**filters.validated_data)
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(ServiceSerializer(page, many=True).data)
        return Response(ServiceSerializer(queryset, many=True).data)

    @extend_schema(
        request=ServiceWriteSerializer,
        responses={201: ServiceSerializer},
        tags=['services'],
    )
    def create(self, request):
        serializer = ServiceWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = create_service(user=request.user, **serializer.validated_data)
        return Response(ServiceSerializer(service).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ServiceDetailSerializer}, tags=['services'])
    def retrieve(self, request, pk=None):
        service = get_service(service_id=pk, count_view=True)
        return Response(ServiceDetailSerializer(service).data)

    @extend_schema(
        request=ServiceWriteSerializer,
        responses={200: ServiceSerializer},
        tags=['services'],
    )
    def update(self, request, pk=None, partial=False):
        serializer = ServiceWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        service = update_service(service_id=pk, user=request.user, **serializer.validated_data)
        return Response(ServiceSerializer(service).data)

    @extend_schema(
        request=ServiceWriteSerializer,
        responses={200: ServiceSerializer},
        tags=['services'],
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    @extend_schema(responses={204: None}, tags=['services'])
    def destroy(self, request, pk=None):
        delete_service(service_id=pk, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request=None,
        responses={200: ServiceSerializer},
        description="Toggle a service between active and inactive.",
        tags=['services'],
    )
    @action(detail=True, methods=['patch'], url_path='status')
    def toggle_status(self, request, pk=None):
        service = toggle_service_status(service_id=pk, user=request.user)
        return Response(ServiceSerializer(service).data)

    @extend_schema(
        request=PromoteServiceSerializer,
        responses={201: ServicePromotionSerializer},
        description="Buy a promotion for one of your services.",
        tags=['services'],
    )
    @action(detail=True, methods=['post'])
    def promote(self, request, pk=None):
        serializer = PromoteServiceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        promotion = promote_service(service_id=pk, user=request.user, **serializer.validated_data)
        return Response(ServicePromotionSerializer(promotion).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: ServiceSerializer(many=True)},
        description="All services of the current provider, including inactive ones.",
        tags=['services'],
    )
    @action(detail=False, methods=['get'])
    def mine(self, request):
        services = get_provider_services(user=request.user)
        return Response(ServiceSerializer(services, many=True).data)

    @extend_schema(
        responses={200: ServiceSerializer(many=True)},
        description="Up to 5 promoted services for the homepage carousel.",
        tags=['services'],
    )
    @action(detail=False, methods=['get'], url_path='featured/slides')
    def featured_slides(self, request):
        return Response(ServiceSerializer(get_featured_slides(), many=True).data)

    @extend_schema(
        responses={200: ServiceSerializer(many=True)},
        description="Up to 12 services promoted as trending.",
        tags=['services'],
    )
    @action(detail=False, methods=['get'])
    def trending(self, request):
        return Response(ServiceSerializer(get_trending_services(), many=True).data)
