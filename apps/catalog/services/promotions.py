"""
Paid promotions.

A promotion sets the service's promotion fields, appends a
``ServicePromotion`` ledger row and records the ``featured_service``
payment, all in one transaction with the service row locked.
"""

import logging
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import User
from apps.catalog.models import PromotionType, Service, ServicePromotion
from apps.payments.models import PaymentStatus, PaymentType
from apps.payments.services import record_payment
from .exceptions import InvalidPromotionError, ServiceNotFoundError
from .service_management import get_owned_service

logger = logging.getLogger(__name__)


PROMOTABLE_TYPES = (
    PromotionType.FEATURED,
    PromotionType.TRENDING,
    PromotionType.SEARCH_BOOST,
)

FEATURED_COST = Decimal('50000')
FEATURED_BOTH_COST = Decimal('80000')
TRENDING_COST = Decimal('30000')
SEARCH_BOOST_COST = Decimal('20000')
DEFAULT_COST = Decimal('50000')

MAX_PROMOTION_DAYS = 3650


def promotion_cost(promotion_type: str, location: str, amount=None) -> Decimal:
    """
    Price of a promotion.

    featured costs 50,000 (80,000 when shown on ``both`` surfaces),
    trending 30,000 and search_boost 20,000. Any other type is charged the
    supplied amount, or 50,000 when none is given.
    """
    if promotion_type == PromotionType.FEATURED:
        return FEATURED_BOTH_COST if location == 'both' else FEATURED_COST
    if promotion_type == PromotionType.TRENDING:
        return TRENDING_COST
    if promotion_type == PromotionType.SEARCH_BOOST:
        return SEARCH_BOOST_COST

    if amount:
        try:
            return Decimal(str(amount))
        except (InvalidOperation, ValueError):
            raise InvalidPromotionError('Amount must be a number')
    return DEFAULT_COST


@transaction.atomic
def promote_service(
    *,
    service_id: UUID,
    user: User,
    promotion_type: str,
    duration_days: int = 30,
    location: str = '',
    payment_method: str = 'demo',
    payment_reference: Optional[str] = None,
    amount=None
) -> ServicePromotion:
    """
    Promote one of the caller's services.

    This operation:
    1. Validates promotion type and duration
    2. Locks the service row and checks ownership
    3. Opens the promotion window and bumps ``featured_priority``
    4. Appends the ledger row with the same expiry
    5. Records a completed ``featured_service`` payment

    Args:
        service_id: UUID of service to promote
        user: Provider user paying for the promotion
        promotion_type: featured | trending | search_boost
        duration_days: Length of the promotion window (>= 1)
        location: Surface the promotion targets (homepage, both, ...)
        payment_method: Payment channel label
        payment_reference: External reference, ``DEMO-<epoch ms>`` if omitted
        amount: Only used for types without a fixed price

    Returns:
        Created ServicePromotion ledger row

    Raises:
        InvalidPromotionError: Unknown type or duration outside 1..MAX_PROMOTION_DAYS
        ServiceNotFoundError: Service does not exist
        ServiceOwnershipError: Caller does not own the service
    """
    if promotion_type not in PROMOTABLE_TYPES:
        raise InvalidPromotionError(
            f"Invalid promotion type: '{promotion_type}'. "
            f"Valid options: {', '.join(PROMOTABLE_TYPES)}"
        )
    try:
        duration_days = int(duration_days)
    except (TypeError, ValueError):
        raise InvalidPromotionError('Duration must be a whole number of days')
    if duration_days < 1:
        raise InvalidPromotionError('Duration must be at least 1 day')
    if duration_days > MAX_PROMOTION_DAYS:
        raise InvalidPromotionError(f"Duration cannot exceed {MAX_PROMOTION_DAYS} days")

    location = location or ''
    service = get_owned_service(service_id=service_id, user=user, lock=True)
    cost = promotion_cost(promotion_type, location, amount)

    now = timezone.now()
    expires_at = now + timedelta(days=duration_days)

    Service.objects.filter(id=service.id).update(
        is_featured=True,
        featured_until=expires_at,
        featured_priority=F('featured_priority') + 1,
        promotion_type=promotion_type,
        promotion_location=location,
        updated_at=now,
    )
    service.refresh_from_db()

    reference = payment_reference or f"DEMO-{int(now.timestamp() * 1000)}"

    promotion = ServicePromotion.objects.create(
        service=service,
        promotion_type=promotion_type,
        promotion_location=location,
        duration_days=duration_days,
        cost=cost,
        payment_method=payment_method or '',
        payment_reference=reference,
        started_at=now,
        expires_at=expires_at,
    )

    record_payment(
        user=user,
        provider=service.provider,
        service=service,
        payment_type=PaymentType.FEATURED_SERVICE,
        amount=cost,
        payment_method=payment_method or '',
        payment_status=PaymentStatus.COMPLETED,
        transaction_id=reference,
        description=f"{promotion_type} promotion for '{service.title}' ({duration_days} days)",
        valid_from=now,
        valid_until=expires_at,
    )

    logger.info(
        "Service %s promoted (%s @ %s) until %s, priority %s, cost %s",
        service.id,
        promotion_type,
        location or '-',
        expires_at.isoformat(),
        service.featured_priority,
        cost,
    )
    return promotion


def expire_lapsed_promotions(now=None) -> int:
    """
    Clear promotion flags on services whose window has closed.

    Ranked reads filter on ``featured_until`` themselves, so this only
    tidies stored state. Returns the number of services touched.
    """
    now = now or timezone.now()
    expired = Service.objects.lapsed_promotions(now).update(
        is_featured=False,
        promotion_type=PromotionType.NONE,
        updated_at=now,
    )
    if expired:
        logger.info("Expired promotions on %s service(s)", expired)
    return expired


@transaction.atomic
def recompute_featured_priority(service_id: UUID) -> int:
    """Rebuild ``featured_priority`` from the promotion ledger."""
    if not Service.objects.filter(id=service_id).exists():
        raise ServiceNotFoundError()

    priority = ServicePromotion.objects.filter(service_id=service_id).count()
    Service.objects.filter(id=service_id).update(featured_priority=priority)
    return priority
