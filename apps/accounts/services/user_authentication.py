"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import ExternalLoginRequiredError, InactiveAccountError, InvalidCredentialsError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email (any case)
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        ExternalLoginRequiredError: Account has no password, only Google
        InactiveAccountError: If account is deactivated
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=User.objects.normalize_email(email))
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError()

    if not user.has_usable_password():
        raise ExternalLoginRequiredError()

    if not user.check_password(password):
        raise InvalidCredentialsError()

    if not user.is_active:
        raise InactiveAccountError()

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user


@transaction.atomic
def resolve_external_identity(
    *,
    google_id: str,
    email: str,
    first_name: str = '',
    last_name: str = '',
    avatar_url: str = ''
) -> dict:
    """
    Map a verified Google profile to an account.

    Matches on ``google_id`` first, then on email. A matched account
    without a linked identity gets ``google_id`` stored. Unknown profiles
    are returned for registration since the user type must be chosen.

    Returns:
        dict: ``{'user': User, 'needs_registration': False}`` or
        ``{'user': None, 'needs_registration': True, 'profile': {...}}``
    """
    email = User.objects.normalize_email(email)

    user = (
        User.objects.select_for_update().filter(google_id=google_id).first()
        or User.objects.select_for_update().filter(email=email).first()
    )

    if user is not None:
        if not user.google_id:
            user.google_id = google_id
            user.save(update_fields=['google_id', 'updated_at'])
            logger.info("Linked Google identity to user %s", user.id)
        return {'user': user, 'needs_registration': False}

    return {
        'user': None,
        'needs_registration': True,
        'profile': {
            'google_id': google_id,
            'email': email,
            'first_name': first_name,
            'last_name': last_name,
            'avatar_url': avatar_url,
        },
    }
