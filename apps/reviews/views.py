from rest_framework import generics, status
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import ReviewSerializer, ReviewCreateSerializer, ReviewFilterSerializer
from .services import create_review, list_service_reviews


class ReviewPagination(PageNumberPagination):
    """Custom pagination for reviews."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema_view(
    get=extend_schema(
        parameters=[
            OpenApiParameter('service', OpenApiTypes.UUID, description='Only reviews of this service'),
        ],
        description="List reviews, newest first.",
        tags=['reviews'],
    ),
    post=extend_schema(
        request=ReviewCreateSerializer,
        responses={201: ReviewSerializer},
        description="Review a service. Travelers only; a booking, if given, must be your own completed one.",
        tags=['reviews'],
    ),
)
class ReviewListCreateView(generics.ListCreateAPIView):
    """
    GET  /api/reviews/?service=<id>
    POST /api/reviews/
    """

    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = ReviewPagination

    def get_queryset(self):
        filters = ReviewFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        return list_service_reviews(service_id=filters.validated_data.get('service'))

    def create(self, request, *args, **kwargs):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = create_review(traveler=request.user, **serializer.validated_data)
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)
