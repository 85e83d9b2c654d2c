from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'', views.ServiceViewSet, basename='service')

urlpatterns = [
    # GET    /api/services/                   - Search catalog
    # POST   /api/services/                   - Create service (provider)
    # GET    /api/services/{id}/              - Service detail (counts a view)
    # PUT    /api/services/{id}/              - Update (owner)
    # DELETE /api/services/{id}/              - Delete (owner)
    # PATCH  /api/services/{id}/status/       - Toggle active (owner)
    # POST   /api/services/{id}/promote/      - Buy promotion (owner)
    # GET    /api/services/mine/              - Caller's services
    # GET    /api/services/featured/slides/   - Homepage carousel
    # GET    /api/services/trending/          - Trending services
    path('', include(router.urls)),
]
