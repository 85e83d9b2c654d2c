from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = ['service', 'traveler', 'provider', 'rating', 'booking', 'created_at']
    list_filter = ['rating', 'created_at']
    search_fields = ['service__title', 'traveler__email', 'comment']
    readonly_fields = ['created_at']
    ordering = ['-created_at']
    list_select_related = ['service', 'traveler', 'provider']
    raw_id_fields = ['booking', 'service', 'traveler', 'provider']
