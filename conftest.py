"""Fixtures shared by every app's tests."""

import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserType
from apps.catalog.models import Service
from apps.providers.models import ServiceProvider


def authenticate(client, user):
    """Attach a JWT access token for ``user`` to ``client``."""
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def traveler(db):
    """Create and return a traveler."""
    return User.objects.create_user(
        email='traveler@example.com',
        password='TestPass123!',
        first_name='Amina',
        last_name='Kweka',
        country='Kenya',
        user_type=UserType.TRAVELER,
    )


@pytest.fixture
def other_traveler(db):
    return User.objects.create_user(
        email='other.traveler@example.com',
        password='TestPass123!',
        first_name='Lars',
        last_name='Berg',
        country='Norway',
        user_type=UserType.TRAVELER,
    )


@pytest.fixture
def provider_user(db):
    """Create and return a service provider user."""
    return User.objects.create_user(
        email='provider@example.com',
        password='TestPass123!',
        first_name='Juma',
        last_name='Mollel',
        user_type=UserType.SERVICE_PROVIDER,
    )


@pytest.fixture
def provider(provider_user):
    """Provider profile belonging to ``provider_user``."""
    return ServiceProvider.objects.create(
        user=provider_user,
        business_name='Kilimanjaro Trails',
        business_type='tour_operator',
        country='Tanzania',
        region='Arusha',
        is_verified=True,
    )


@pytest.fixture
def other_provider_user(db):
    return User.objects.create_user(
        email='other.provider@example.com',
        password='TestPass123!',
        first_name='Neema',
        last_name='Said',
        user_type=UserType.SERVICE_PROVIDER,
    )


@pytest.fixture
def other_provider(other_provider_user):
    return ServiceProvider.objects.create(
        user=other_provider_user,
        business_name='Zanzibar Dhow Tours',
        country='Tanzania',
        region='Zanzibar',
    )


@pytest.fixture
def service(provider):
    """Active service priced at 100."""
    return Service.objects.create(
        provider=provider,
        title='Ngorongoro Day Safari',
        description='Full day crater tour',
        category='safari',
        price=Decimal('100.00'),
        location='Ngorongoro',
        country='Tanzania',
        region='Arusha',
    )


@pytest.fixture
def traveler_client(traveler):
    """API client authenticated as the traveler."""
    return authenticate(APIClient(), traveler)


@pytest.fixture
def other_traveler_client(other_traveler):
    return authenticate(APIClient(), other_traveler)


@pytest.fixture
def provider_client(provider, provider_user):
    """API client authenticated as the provider user."""
    return authenticate(APIClient(), provider_user)


@pytest.fixture
def other_provider_client(other_provider, other_provider_user):
    return authenticate(APIClient(), other_provider_user)
