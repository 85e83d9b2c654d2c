from django.contrib import admin

from .models import ServiceProvider


@admin.register(ServiceProvider)
class ServiceProviderAdmin(admin.ModelAdmin):
    list_display = [
        'business_name',
        'user',
        'country',
        'region',
        'rating',
        'total_bookings',
        'is_verified',
        'created_at',
    ]
    list_filter = ['is_verified', 'country', 'business_type']
    search_fields = ['business_name', 'user__email', 'location', 'region']
    readonly_fields = ['rating', 'total_bookings', 'created_at', 'updated_at']
    ordering = ['-created_at']
    list_select_related = ['user']

    actions = ['verify_providers']

    @admin.action(description='Mark selected providers as verified')
    def verify_providers(self, request, queryset):
        count = queryset.update(is_verified=True)
        self.message_user(request, f'Verified {count} provider(s).')
