"""Profile updates for the current user."""

from django.contrib.auth import get_user_model

User = get_user_model()


PROFILE_FIELDS = ('first_name', 'last_name', 'phone', 'country', 'avatar_url')


def update_profile(*, user: User, **fields) -> User:
    """
    Update editable profile fields.

    Unknown keys are ignored; email and user type cannot be changed here.
    """
    changed = [name for name in PROFILE_FIELDS if name in fields]
    for name in changed:
        setattr(user, name, fields[name] if fields[name] is not None else '')

    if changed:
        user.save(update_fields=changed + ['updated_at'])
    return user
