"""Service management - CRUD operations for provider listings."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F, QuerySet

from apps.accounts.models import User
from apps.catalog.models import Service
from apps.providers.models import ServiceProvider
from .exceptions import (
    ServiceNotFoundError,
    ServiceOwnershipError,
    InvalidServiceDataError,
)

logger = logging.getLogger(__name__)


EDITABLE_FIELDS = (
    'title',
    'description',
    'category',
    'subcategory',
    'price',
    'currency',
    'duration',
    'max_participants',
    'location',
    'country',
    'region',
    'district',
    'area',
    'images',
    'amenities',
)


def _caller_provider(user: User) -> ServiceProvider:
    try:
        return ServiceProvider.objects.get(user=user)
    except ServiceProvider.DoesNotExist:
        raise ServiceOwnershipError('Only service providers can manage services')


def _clean_price(value) -> Decimal:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidServiceDataError('Price must be a number')
    if price < 0:
        raise InvalidServiceDataError('Price cannot be negative')
    return price


def _clean_fields(fields: dict) -> dict:
    cleaned = {name: fields[name] for name in EDITABLE_FIELDS if name in fields}

    if 'title' in cleaned:
        cleaned['title'] = (cleaned['title'] or '').strip()
        if not cleaned['title']:
            raise InvalidServiceDataError('Title is required')
    if 'price' in cleaned:
        cleaned['price'] = _clean_price(cleaned['price'])
    for list_field in ('images', 'amenities'):
        if list_field in cleaned and cleaned[list_field] is None:
            cleaned[list_field] = []

    return cleaned


def get_owned_service(
    *,
    service_id: UUID,
    user: User,
    lock: bool = False
) -> Service:
    """
    Fetch a service and check that ``user`` owns its provider profile.

    Raises:
        ServiceNotFoundError: If service doesn't exist
        ServiceOwnershipError: If caller has no provider profile or
            the service belongs to someone else
    """
    queryset = Service.objects.select_related('provider')
    if lock:
        queryset = queryset.select_for_update()

    try:
        service = queryset.get(id=service_id)
    except (Service.DoesNotExist, ValidationError):
        raise ServiceNotFoundError()

    provider = _caller_provider(user)
    if service.provider_id != provider.id:
        raise ServiceOwnershipError()

    return service


@transaction.atomic
def create_service(*, user: User, **fields) -> Service:
    """
    Create a new service for the caller's provider profile.

    Args:
        user: Provider user creating the listing
        **fields: Any of EDITABLE_FIELDS; title and price are required

    Returns:
        Created Service instance

    Raises:
        ServiceOwnershipError: If caller has no provider profile
        InvalidServiceDataError: If title is blank or price invalid
    """
    provider = _caller_provider(user)

    if 'title' not in fields:
        raise InvalidServiceDataError('Title is required')
    if fields.get('price') is None:
        raise InvalidServiceDataError('Price is required')

    cleaned = _clean_fields(fields)
    if not cleaned.get('currency'):
        cleaned.pop('currency', None)

    service = Service.objects.create(provider=provider, **cleaned)
    logger.info("Service %s created by provider %s", service.id, provider.id)
    return service


@transaction.atomic
def update_service(*, service_id: UUID, user: User, **fields) -> Service:
    """
    Update a service. Only the owner may update; promotion state and
    counters are not editable here.
    """
    service = get_owned_service(service_id=service_id, user=user, lock=True)

    cleaned = _clean_fields(fields)
    for name, value in cleaned.items():
        setattr(service, name, value)

    if cleaned:
        service.save(update_fields=list(cleaned) + ['updated_at'])

    return service


@transaction.atomic
def delete_service(*, service_id: UUID, user: User) -> None:
    """Delete a service. Only the owner may delete."""
    service = get_owned_service(service_id=service_id, user=user)
    service.delete()
    logger.info("Service %s deleted by user %s", service_id, user.id)


@transaction.atomic
def toggle_service_status(*, service_id: UUID, user: User) -> Service:
    """Flip ``is_active`` on the caller's service."""
    service = get_owned_service(service_id=service_id, user=user, lock=True)
    service.is_active = not service.is_active
    service.save(update_fields=['is_active', 'updated_at'])
    logger.info(
        "Service %s %s",
        service.id,
        'activated' if service.is_active else 'deactivated',
    )
    return service


def get_service(*, service_id: UUID, count_view: bool = True) -> Service:
    """
    Retrieve a service with provider and provider user.

    When ``count_view`` is set the view counter is incremented atomically
    and the returned instance reflects the new value.
    """
    try:
        if count_view and not Service.objects.filter(id=service_id).update(views_count=F('views_count') + 1):
            raise ServiceNotFoundError()
        return Service.objects.select_related('provider', 'provider__user').get(id=service_id)
    except (Service.DoesNotExist, ValidationError):
        raise ServiceNotFoundError()


def get_provider_services(*, user: User, is_active: Optional[bool] = None) -> QuerySet:
    """All services of the caller's provider profile, newest first."""
    provider = _caller_provider(user)
    queryset = Service.objects.filter(provider=provider)
    if is_active is not None:
        queryset = queryset.filter(is_active=is_active)
    return queryset.order_by('-created_at')
