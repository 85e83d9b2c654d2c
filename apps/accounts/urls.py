from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # Current user
    path('me/', views.get_current_user, name='me'),
    path('me/update/', views.update_profile, name='update-profile'),
]
