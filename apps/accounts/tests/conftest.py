import pytest

from apps.accounts.models import User


@pytest.fixture
def inactive_user(db):
    """Create and return an inactive traveler."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        first_name='Idle',
        last_name='User',
        is_active=False,
    )


@pytest.fixture
def google_user(db):
    """Traveler registered through Google only (no password)."""
    return User.objects.create_user(
        email='google.user@example.com',
        first_name='Gee',
        last_name='Mail',
        google_id='google-123',
    )
