from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    BookingCreateSerializer,
    BookingStatusSerializer,
    BookingFilterSerializer,
    RecentActivityQuerySerializer,
    BookingSerializer,
    RecentActivitySerializer,
)
from .services import (
    create_booking,
    transition_booking,
    cancel_booking,
    get_booking,
    get_user_bookings,
    get_recent_activity,
)


class BookingPagination(PageNumberPagination):
    """Custom pagination for bookings."""
    page_size = 10
    page_size_query_param = 'page_size'
    max_page_size = 100


class BookingViewSet(viewsets.GenericViewSet):
    """
    Bookings for the current user.

    list: Traveler's own bookings, or bookings for the provider's services
    create: Book a service (travelers only)
    retrieve: Booking detail (traveler or provider)
    destroy: Cancel a booking (traveler only)
    status: Move a booking through its lifecycle
    recent_activity: Public homepage feed
    """

    serializer_class = BookingSerializer
    pagination_class = BookingPagination
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_permissions(self):
        if self.action == 'recent_activity':
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[
            OpenApiParameter('status', OpenApiTypes.STR, description='Filter by booking status'),
        ],
        responses={200: BookingSerializer(many=True)},
        tags=['bookings'],
    )
    def list(self, request):
        filters = BookingFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = get_user_bookings(user=request.user, status=filters.validated_data.get('status'))
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(BookingSerializer(page, many=True).data)
        return Response(BookingSerializer(queryset, many=True).data)

    @extend_schema(
        request=BookingCreateSerializer,
        responses={201: BookingSerializer},
        tags=['bookings'],
    )
    def create(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = create_booking(traveler=request.user, **serializer.validated_data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: BookingSerializer}, tags=['bookings'])
    def retrieve(self, request, pk=None):
        booking = get_booking(booking_id=pk, user=request.user)
        return Response(BookingSerializer(booking).data)

    @extend_schema(
        responses={200: BookingSerializer},
        description="Cancel a booking. Completed bookings cannot be cancelled.",
        tags=['bookings'],
    )
    def destroy(self, request, pk=None):
        booking = cancel_booking(booking_id=pk, traveler=request.user)
        return Response(BookingSerializer(booking).data)

    @extend_schema(
        request=BookingStatusSerializer,
        responses={200: BookingSerializer},
        description="Change booking status. Providers confirm/complete, travelers cancel.",
        tags=['bookings'],
    )
    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = transition_booking(
            booking_id=pk,
            new_status=serializer.validated_data['status'],
            actor=request.user,
        )
        return Response(BookingSerializer(booking).data)

    @extend_schema(
        parameters=[
            OpenApiParameter('limit', OpenApiTypes.INT, description='Number of activities', default=10),
        ],
        responses={200: RecentActivitySerializer},
        description="Recent confirmed bookings and marketplace stats for the homepage.",
        tags=['bookings'],
    )
    @action(detail=False, methods=['get'], url_path='recent-activity')
    def recent_activity(self, request):
        query = RecentActivityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        data = get_recent_activity(limit=query.validated_data['limit'])
        return Response(RecentActivitySerializer(data).data)
