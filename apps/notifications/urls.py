from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('', views.NotificationListView.as_view(), name='notification-list'),
    path('read-all/', views.read_all_notifications, name='notification-read-all'),
    path('<uuid:pk>/read/', views.read_notification, name='notification-read'),
]
