from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'stories'

router = DefaultRouter()
router.register(r'', views.TravelerStoryViewSet, basename='story')

urlpatterns = [
    # GET  /api/stories/              - Approved stories
    # POST /api/stories/              - Submit story
    # GET  /api/stories/{id}/         - Story with latest comments
    # POST /api/stories/{id}/like/    - Like story
    # POST /api/stories/{id}/comment/ - Comment on story
    path('', include(router.urls)),
]
