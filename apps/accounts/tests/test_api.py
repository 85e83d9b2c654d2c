import pytest
from django.urls import reverse
from rest_framework import status

from apps.accounts.models import User


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_traveler(self, api_client):
        """Successfully register a traveler."""
        url = reverse('accounts:register')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'first_name': 'New',
            'last_name': 'User',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['user_type'] == 'traveler'
        assert response.data['user']['provider_id'] is None

    def test_register_provider(self, api_client):
        """Provider registration returns the new provider profile id."""
        url = reverse('accounts:register')
        data = {
            'email': 'safari@example.com',
            'password': 'SecurePass123!',
            'first_name': 'Safari',
            'last_name': 'Guide',
            'user_type': 'service_provider',
            'provider_details': {'region': 'Arusha'},
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['provider_id'] is not None

    def test_register_duplicate_email(self, api_client, traveler):
        """Cannot register with existing email."""
        url = reverse('accounts:register')
        data = {
            'email': 'Traveler@Example.com',
            'password': 'SecurePass123!',
            'first_name': 'Dup',
            'last_name': 'User',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['kind'] == 'conflict'

    def test_register_password_mismatch(self, api_client):
        url = reverse('accounts:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'Different123!',
            'first_name': 'Mis',
            'last_name': 'Match',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data['fields']

    def test_register_invalid_user_type(self, api_client):
        url = reverse('accounts:register')
        data = {
            'email': 'admin@example.com',
            'password': 'SecurePass123!',
            'first_name': 'Ad',
            'last_name': 'Min',
            'user_type': 'admin',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation_error'
        assert not User.objects.filter(email='admin@example.com').exists()


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, traveler):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': traveler.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == traveler.email

    def test_login_wrong_password(self, api_client, traveler):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': traveler.email, 'password': 'WrongPassword123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid credentials'

    def test_login_google_only_account(self, api_client, google_user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': google_user.email, 'password': 'anything'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Please use Google login for this account'

    def test_login_inactive_user(self, api_client, inactive_user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': inactive_user.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Session Tests
# =============================================================================

@pytest.mark.django_db
class TestLogoutAndMe:

    def test_logout(self, traveler_client):
        response = traveler_client.post(reverse('accounts:logout'), {'refresh': 'garbage'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Logout successful'

    def test_logout_unauthenticated(self, api_client):
        response = api_client.post(reverse('accounts:logout'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me(self, provider_client, provider):
        response = provider_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user_type'] == 'service_provider'
        assert response.data['provider_id'] == str(provider.id)

    def test_update_profile(self, traveler_client, traveler):
        response = traveler_client.patch(
            reverse('accounts:update-profile'),
            {'phone': '+254700000000', 'user_type': 'service_provider'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        traveler.refresh_from_db()
        assert traveler.phone == '+254700000000'
        assert traveler.user_type == 'traveler'

    def test_token_refresh(self, api_client, traveler):
        login = api_client.post(
            reverse('accounts:login'),
            {'email': traveler.email, 'password': 'TestPass123!'},
        )
        response = api_client.post(reverse('token_refresh'), {'refresh': login.data['tokens']['refresh']})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
