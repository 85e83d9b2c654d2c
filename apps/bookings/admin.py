from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = [
        'id',
        'traveler',
        'service',
        'provider',
        'booking_date',
        'participants',
        'total_amount',
        'status',
        'payment_status',
        'created_at',
    ]
    list_filter = ['status', 'payment_status', 'booking_date']
    search_fields = ['traveler__email', 'service__title', 'provider__business_name']
    readonly_fields = ['traveler', 'service', 'provider', 'total_amount', 'created_at', 'updated_at']
    list_select_related = ['traveler', 'service', 'provider']
    date_hierarchy = 'created_at'
