from django.urls import path
from . import views

app_name = 'reviews'

urlpatterns = [
    # GET  /api/reviews/?service=<id>  - List reviews
    # POST /api/reviews/               - Create review (traveler)
    path('', views.ReviewListCreateView.as_view(), name='review-list'),
]
