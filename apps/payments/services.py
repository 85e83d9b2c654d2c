"""Payment recording and lookup."""

from decimal import Decimal
from typing import Optional

from django.db.models import QuerySet

from apps.accounts.models import User
from .models import Payment, PaymentStatus


def record_payment(
    *,
    user: User,
    payment_type: str,
    amount: Decimal,
    payment_method: str = '',
    transaction_id: str = '',
    payment_status: str = PaymentStatus.COMPLETED,
    provider=None,
    service=None,
    description: str = '',
    valid_from=None,
    valid_until=None
) -> Payment:
    """Persist a payment row. Callers own the surrounding transaction."""
    fields = dict(
        user=user,
        provider=provider,
        service=service,
        payment_type=payment_type,
        amount=amount,
        payment_method=payment_method,
        payment_status=payment_status,
        transaction_id=transaction_id,
        description=description,
        valid_until=valid_until,
    )
    if valid_from is not None:
        fields['valid_from'] = valid_from
    return Payment.objects.create(**fields)


def get_user_payments(
    *,
    user: User,
    payment_type: Optional[str] = None,
    payment_status: Optional[str] = None
) -> QuerySet:
    """Payments made by ``user``, newest first."""
    queryset = Payment.objects.filter(user=user).select_related('service')
    if payment_type:
        queryset = queryset.filter(payment_type=payment_type)
    if payment_status:
        queryset = queryset.filter(payment_status=payment_status)
    return queryset.order_by('-created_at')
