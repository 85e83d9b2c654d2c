from rest_framework import generics
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import NotificationSerializer, MarkAllReadResponseSerializer
from .services import list_notifications, mark_read, mark_all_read


class NotificationPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema(
    parameters=[
        OpenApiParameter('unread', OpenApiTypes.BOOL, description='Only unread notifications'),
    ],
    description="List the current user's notifications, newest first.",
    tags=['notifications'],
)
class NotificationListView(generics.ListAPIView):
    """GET /api/notifications/"""

    serializer_class = NotificationSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = NotificationPagination

    def get_queryset(self):
        unread = self.request.query_params.get('unread', '').lower() in ('1', 'true', 'yes')
        return list_notifications(user=self.request.user, unread_only=unread)


@extend_schema(
    request=None,
    responses={200: NotificationSerializer},
    description="Mark a notification as read.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def read_notification(request, pk):
    notification = mark_read(notification_id=pk, user=request.user)
    return Response(NotificationSerializer(notification).data)


@extend_schema(
    request=None,
    responses={200: MarkAllReadResponseSerializer},
    description="Mark all of the current user's notifications as read.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def read_all_notifications(request):
    updated = mark_all_read(user=request.user)
    return Response({'updated': updated})
