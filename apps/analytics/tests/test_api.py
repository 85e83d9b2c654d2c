"""API tests for analytics endpoints."""

import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestProviderAnalyticsEndpoint:

    def test_provider_gets_dashboard(self, provider_client):
        response = provider_client.get(reverse('analytics:provider-analytics'), {'time_range': '7days'})

        assert response.status_code == status.HTTP_200_OK
        assert set(response.data) == {
            'revenue', 'bookings', 'customers', 'rating',
            'top_services', 'top_countries', 'monthly_data',
        }
        assert response.data['customers']['trend'] == 'neutral'

    def test_invalid_time_range(self, provider_client):
        response = provider_client.get(reverse('analytics:provider-analytics'), {'time_range': 'forever'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation_error'

    def test_traveler_forbidden(self, traveler_client):
        response = traveler_client.get(reverse('analytics:provider-analytics'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['kind'] == 'forbidden'

    def test_requires_auth(self, api_client):
        response = api_client.get(reverse('analytics:provider-analytics'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
