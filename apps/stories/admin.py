from django.contrib import admin

from .models import TravelerStory, StoryLike, StoryComment


@admin.register(TravelerStory)
class TravelerStoryAdmin(admin.ModelAdmin):
    list_display = ['title', 'user', 'location', 'is_approved', 'is_active', 'likes_count', 'comments_count', 'created_at']
    list_filter = ['is_approved', 'is_active', 'created_at']
    search_fields = ['title', 'location', 'user__email']
    readonly_fields = ['likes_count', 'comments_count', 'created_at', 'updated_at']
    ordering = ['-created_at']
    list_select_related = ['user']

    actions = ['approve_stories']

    @admin.action(description='Approve selected stories')
    def approve_stories(self, request, queryset):
        count = queryset.update(is_approved=True)
        self.message_user(request, f'Approved {count} story(ies).')


@admin.register(StoryLike)
class StoryLikeAdmin(admin.ModelAdmin):
    list_display = ['story', 'user', 'created_at']
    raw_id_fields = ['story', 'user']


@admin.register(StoryComment)
class StoryCommentAdmin(admin.ModelAdmin):
    list_display = ['story', 'user', 'created_at']
    search_fields = ['comment', 'user__email']
    raw_id_fields = ['story', 'user']
