from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = [
        'user',
        'payment_type',
        'amount',
        'currency',
        'payment_status',
        'transaction_id',
        'created_at',
    ]
    list_filter = ['payment_type', 'payment_status', 'currency']
    search_fields = ['user__email', 'transaction_id', 'description']
    readonly_fields = ['created_at', 'updated_at']
    list_select_related = ['user', 'service']
    date_hierarchy = 'created_at'
