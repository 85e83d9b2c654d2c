from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    path('provider/', views.provider_analytics, name='provider-analytics'),
]
