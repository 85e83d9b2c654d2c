# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for marketplace accounts.

    - Listing with user type and verification badges
    - Filtering by type, status and verification
    - Bulk activate, deactivate and verify actions
    """

    list_display = [
        'email',
        'get_full_name',
        'user_type_badge',
        'is_active_badge',
        'is_verified_badge',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'user_type',
        'is_active',
        'is_staff',
        'is_verified',
        'created_at',
    ]

    search_fields = [
        'email',
        'first_name',
        'last_name',
        'phone',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'first_name', 'last_name', 'password')
        }),
        ('Profile', {
            'fields': ('user_type', 'phone', 'country', 'avatar_url'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Verification', {
            'fields': ('is_verified', 'google_id'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'user_type', 'password1', 'password2'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser'),
        }),
    )

    filter_horizontal = ['groups', 'user_permissions']

    def get_readonly_fields(self, request, obj=None):
        readonly = ['created_at', 'updated_at', 'last_login']
        if obj is not None:
            readonly.append('user_type')
        return readonly

    def _badge(self, label, background, color='white'):
        return format_html(
            '<span style="background: {}; color: {}; padding: 2px 9px; border-radius: 8px;">{}</span>',
            background,
            color,
            label,
        )

    @admin.display(description='Type', ordering='user_type')
    def user_type_badge(self, obj):
        if obj.is_service_provider:
            return self._badge('Provider', '#1F6F8B')
        return self._badge('Traveler', '#D98C3F')

    @admin.display(description='Status', ordering='is_active')
    def is_active_badge(self, obj):
        return self._badge('Active', '#2E7D4F') if obj.is_active else self._badge('Inactive', '#A94442')

    @admin.display(description='Verified', ordering='is_verified')
    def is_verified_badge(self, obj):
        if obj.is_verified:
            return self._badge('Verified', '#2E7D4F')
        return self._badge('Unverified', '#F0E1C6', '#5B4A2F')

    actions = [
        'activate_users',
        'deactivate_users',
        'verify_users',
    ]

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (superusers are skipped)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)

    @admin.action(description='Mark selected users as verified')
    def verify_users(self, request, queryset):
        count = queryset.update(is_verified=True)
        self.message_user(request, f'Verified {count} user(s).')
