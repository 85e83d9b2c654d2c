# ==========================================
# apps/stories/models.py
# ==========================================

from django.db import models
import uuid


class StoryQuerySet(models.QuerySet):

    def published(self):
        return self.filter(is_approved=True, is_active=True)


class TravelerStory(models.Model):
    """Trip write-up shared by a user, shown once moderated."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='stories')
    title = models.CharField(max_length=200)
    story = models.TextField()
    location = models.CharField(max_length=200)
    duration = models.CharField(max_length=100, blank=True)
    highlights = models.JSONField(default=list, blank=True)
    media = models.JSONField(default=list, blank=True)

    is_approved = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    likes_count = models.PositiveIntegerField(default=0)
    comments_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = StoryQuerySet.as_manager()

    class Meta:
        db_table = 'traveler_stories'
        verbose_name_plural = 'traveler stories'
        indexes = [
            models.Index(fields=['is_approved', 'is_active', '-created_at']),
            models.Index(fields=['user', '-created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class StoryLike(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    story = models.ForeignKey(TravelerStory, on_delete=models.CASCADE, related_name='likes')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='story_likes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'story_likes'
        constraints = [
            models.UniqueConstraint(fields=['story', 'user'], name='story_likes_unique_story_user'),
        ]

    def __str__(self):
        return f"{self.user} likes {self.story}"


class StoryComment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    story = models.ForeignKey(TravelerStory, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='story_comments')
    comment = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'story_comments'
        indexes = [
            models.Index(fields=['story', '-created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} on {self.story}"
