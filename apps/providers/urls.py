from django.urls import path
from . import views

app_name = 'providers'

urlpatterns = [
    path('', views.ProviderListView.as_view(), name='provider-list'),
    path('profile/', views.update_profile, name='provider-profile'),
    path('<uuid:pk>/', views.provider_detail, name='provider-detail'),
]
