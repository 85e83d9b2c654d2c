"""User registration service."""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from apps.accounts.models import UserType
from apps.providers.models import ServiceProvider
from .exceptions import EmailAlreadyRegisteredError, UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


PROVIDER_FIELDS = (
    'business_type',
    'description',
    'location',
    'country',
    'region',
    'district',
    'area',
    'license_number',
)


def default_business_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}'s Business"


@transaction.atomic
def register_user(
    *,
    email: str,
    first_name: str,
    last_name: str,
    user_type: str = UserType.TRAVELER,
    password: Optional[str] = None,
    phone: str = '',
    country: str = '',
    google_id: Optional[str] = None,
    avatar_url: str = '',
    business_name: str = '',
    provider_details: Optional[dict] = None
) -> User:
    """
    Register a traveler or service provider.

    Service providers get their ``ServiceProvider`` profile in the same
    transaction, named ``"<first> <last>'s Business"`` unless a business
    name is given.

    Args:
        email: Login email, stored lower-cased
        first_name: Given name
        last_name: Family name
        user_type: traveler | service_provider
        password: Required unless ``google_id`` is given
        phone: Optional phone number
        country: Traveler's country
        google_id: External identity to link
        avatar_url: Profile picture
        business_name: Provider business name
        provider_details: Extra provider profile fields (location, region...)

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: Missing password and identity, or bad user type
        EmailAlreadyRegisteredError: Email already in use
    """
    email = User.objects.normalize_email(email)
    if not email:
        raise UserRegistrationError('Email is required')
    if user_type not in UserType.values:
        raise UserRegistrationError(
            f"Invalid user type: '{user_type}'. Valid options: {', '.join(UserType.values)}"
        )
    if not password and not google_id:
        raise UserRegistrationError('Password is required')
    if User.objects.filter(email=email).exists():
        raise EmailAlreadyRegisteredError()

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password or None,
                first_name=first_name,
                last_name=last_name,
                user_type=user_type,
                phone=phone or '',
                country=country or '',
                google_id=google_id or None,
                avatar_url=avatar_url or '',
            )
    except IntegrityError:
        raise EmailAlreadyRegisteredError('An account with this email or Google identity already exists')

    if user.is_service_provider:
        details = {
            key: value for key, value in (provider_details or {}).items()
            if key in PROVIDER_FIELDS and value
        }
        ServiceProvider.objects.create(
            user=user,
            business_name=business_name or default_business_name(first_name, last_name),
            **details,
        )

    logger.info("Registered %s %s", user.user_type, user.id)
    return user
