"""Service layer tests for accounts app."""

import pytest

from apps.accounts.models import User, UserType
from apps.accounts.services import (
    register_user,
    authenticate_user,
    resolve_external_identity,
    update_profile,
)
from apps.accounts.services.exceptions import (
    EmailAlreadyRegisteredError,
    ExternalLoginRequiredError,
    InactiveAccountError,
    InvalidCredentialsError,
    UserRegistrationError,
)
from apps.providers.models import ServiceProvider


@pytest.mark.django_db
class TestRegisterUser:

    def test_register_traveler(self):
        user = register_user(
            email='New@Example.com',
            password='SecurePass123!',
            first_name='New',
            last_name='Traveler',
            country='Ghana',
        )

        assert user.email == 'new@example.com'
        assert user.is_traveler
        assert user.check_password('SecurePass123!')
        assert not ServiceProvider.objects.filter(user=user).exists()

    def test_register_provider_creates_profile(self):
        user = register_user(
            email='guide@example.com',
            password='SecurePass123!',
            first_name='Baraka',
            last_name='Laizer',
            user_type=UserType.SERVICE_PROVIDER,
            provider_details={'region': 'Arusha', 'country': 'Tanzania', 'unknown': 'ignored'},
        )

        profile = ServiceProvider.objects.get(user=user)
        assert profile.business_name == "Baraka Laizer's Business"
        assert profile.region == 'Arusha'

    def test_register_provider_with_business_name(self):
        user = register_user(
            email='dhow@example.com',
            password='SecurePass123!',
            first_name='Ali',
            last_name='Omar',
            user_type=UserType.SERVICE_PROVIDER,
            business_name='Dhow Sunset Cruises',
        )
        assert user.provider_profile.business_name == 'Dhow Sunset Cruises'

    def test_duplicate_email_conflicts(self, traveler):
        with pytest.raises(EmailAlreadyRegisteredError):
            register_user(
                email='TRAVELER@example.com',
                password='SecurePass123!',
                first_name='Again',
                last_name='Me',
            )

    def test_password_or_google_id_required(self):
        with pytest.raises(UserRegistrationError):
            register_user(email='x@example.com', first_name='X', last_name='Y')

    def test_register_with_google_id_only(self):
        user = register_user(
            email='g@example.com',
            first_name='G',
            last_name='User',
            google_id='google-999',
        )
        assert user.google_id == 'google-999'
        assert not user.has_usable_password()

    def test_invalid_user_type(self):
        with pytest.raises(UserRegistrationError):
            register_user(
                email='x@example.com',
                password='SecurePass123!',
                first_name='X',
                last_name='Y',
                user_type='admin',
            )
        assert not User.objects.filter(email='x@example.com').exists()


@pytest.mark.django_db
class TestAuthenticateUser:

    def test_success_updates_last_login(self, traveler):
        user = authenticate_user(email='Traveler@Example.com', password='TestPass123!')

        assert user == traveler
        assert user.last_login is not None

    def test_wrong_password(self, traveler):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=traveler.email, password='nope')

    def test_unknown_email(self, db):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email='ghost@example.com', password='TestPass123!')

    def test_google_only_account(self, google_user):
        with pytest.raises(ExternalLoginRequiredError):
            authenticate_user(email=google_user.email, password='whatever')

    def test_inactive_account(self, inactive_user):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=inactive_user.email, password='TestPass123!')


@pytest.mark.django_db
class TestResolveExternalIdentity:

    def test_match_by_google_id(self, google_user):
        result = resolve_external_identity(google_id='google-123', email='changed@example.com')

        assert result['needs_registration'] is False
        assert result['user'] == google_user

    def test_match_by_email_links_identity(self, traveler):
        result = resolve_external_identity(google_id='google-456', email='TRAVELER@example.com')

        traveler.refresh_from_db()
        assert result['user'] == traveler
        assert traveler.google_id == 'google-456'

    def test_unknown_profile_needs_registration(self, db):
        result = resolve_external_identity(
            google_id='google-789',
            email='Fresh@Example.com',
            first_name='Fresh',
            last_name='Face',
        )

        assert result['needs_registration'] is True
        assert result['user'] is None
        assert result['profile']['email'] == 'fresh@example.com'
        assert result['profile']['google_id'] == 'google-789'
        assert not User.objects.filter(email='fresh@example.com').exists()


@pytest.mark.django_db
class TestUpdateProfile:

    def test_updates_editable_fields_only(self, traveler):
        user = update_profile(user=traveler, phone='+255700000000', email='hijack@example.com')

        traveler.refresh_from_db()
        assert user.phone == '+255700000000'
        assert traveler.phone == '+255700000000'
        assert traveler.email == 'traveler@example.com'
