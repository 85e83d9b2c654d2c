"""Provider directory and profile management."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.providers.models import ServiceProvider
from .exceptions import ProviderNotFoundError, NotServiceProviderError

logger = logging.getLogger(__name__)


PROFILE_FIELDS = (
    'business_name',
    'business_type',
    'description',
    'location',
    'country',
    'region',
    'district',
    'area',
    'license_number',
)


def get_provider_for_user(*, user: User) -> ServiceProvider:
    """
    Return the provider profile owned by ``user``.

    Raises:
        NotServiceProviderError: If the user is not a service provider
        ProviderNotFoundError: If the profile row is missing
    """
    if not user.is_service_provider:
        raise NotServiceProviderError()

    try:
        return ServiceProvider.objects.select_related('user').get(user=user)
    except ServiceProvider.DoesNotExist:
        raise ProviderNotFoundError()


def get_provider(*, provider_id: UUID) -> ServiceProvider:
    """Retrieve a provider with its user."""
    try:
        return ServiceProvider.objects.select_related('user').get(id=provider_id)
    except ServiceProvider.DoesNotExist:
        raise ProviderNotFoundError('Provider not found')


def list_providers(
    *,
    country: Optional[str] = None,
    region: Optional[str] = None
) -> QuerySet:
    """
    Public provider directory.

    Only verified providers are listed, best rated first, ties broken
    by booking volume.
    """
    queryset = ServiceProvider.objects.filter(is_verified=True).select_related('user')

    if country:
        queryset = queryset.filter(country=country)
    if region:
        queryset = queryset.filter(region=region)

    return queryset.order_by('-rating', '-total_bookings')


@transaction.atomic
def update_provider_profile(*, user: User, **fields) -> ServiceProvider:
    """
    Update the caller's provider profile.

    Only profile fields are accepted; empty values leave the stored
    value untouched.
    """
    provider = get_provider_for_user(user=user)

    updated = []
    for name in PROFILE_FIELDS:
        value = fields.get(name)
        if value:
            setattr(provider, name, value)
            updated.append(name)

    if updated:
        provider.save(update_fields=updated + ['updated_at'])
        logger.info("Provider %s updated profile fields: %s", provider.id, ', '.join(updated))

    return provider
