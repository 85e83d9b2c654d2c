from django.contrib import admin

from .models import Service, ServicePromotion


class ServicePromotionInline(admin.TabularInline):
    model = ServicePromotion
    extra = 0
    can_delete = False
    readonly_fields = [
        'promotion_type',
        'promotion_location',
        'duration_days',
        'cost',
        'payment_reference',
        'started_at',
        'expires_at',
    ]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = [
        'title',
        'provider',
        'category',
        'price',
        'currency',
        'is_active',
        'is_featured',
        'featured_until',
        'bookings_count',
        'average_rating',
    ]
    list_filter = ['is_active', 'is_featured', 'promotion_type', 'category', 'country']
    search_fields = ['title', 'description', 'provider__business_name', 'location']
    readonly_fields = [
        'featured_priority',
        'views_count',
        'bookings_count',
        'average_rating',
        'created_at',
        'updated_at',
    ]
    list_select_related = ['provider']
    inlines = [ServicePromotionInline]


@admin.register(ServicePromotion)
class ServicePromotionAdmin(admin.ModelAdmin):
    list_display = ['service', 'promotion_type', 'promotion_location', 'cost', 'started_at', 'expires_at']
    list_filter = ['promotion_type', 'promotion_location']
    search_fields = ['service__title', 'payment_reference']
    list_select_related = ['service']

    def has_change_permission(self, request, obj=None):
        return False
