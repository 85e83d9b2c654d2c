from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'bookings'

router = DefaultRouter()
router.register(r'', views.BookingViewSet, basename='booking')

urlpatterns = [
    # GET    /api/bookings/                   - List bookings
    # POST   /api/bookings/                   - Create booking (traveler)
    # GET    /api/bookings/{id}/              - Booking detail
    # DELETE /api/bookings/{id}/              - Cancel booking (traveler)
    # PATCH  /api/bookings/{id}/status/       - Change status
    # GET    /api/bookings/recent-activity/   - Public activity feed
    path('', include(router.urls)),
]
