"""DRF exception handler rendering every error as ``{"error", "kind"}``."""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import exceptions as drf_exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

from .exceptions import DomainError, DomainValidationError, StoreError

logger = logging.getLogger(__name__)


KIND_STATUS = {
    'validation_error': status.HTTP_400_BAD_REQUEST,
    'not_authenticated': status.HTTP_401_UNAUTHORIZED,
    'forbidden': status.HTTP_403_FORBIDDEN,
    'not_found': status.HTTP_404_NOT_FOUND,
    'invalid_transition': status.HTTP_409_CONFLICT,
    'conflict': status.HTTP_409_CONFLICT,
    'store_error': status.HTTP_503_SERVICE_UNAVAILABLE,
}

# DRF's own codes folded into the marketplace kinds
KIND_ALIASES = {
    'invalid': 'validation_error',
    'parse_error': 'validation_error',
    'permission_denied': 'forbidden',
}


def _first_message(detail):
    """Pull a human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def _django_validation_message(exc):
    if hasattr(exc, 'message_dict'):
        return '; '.join(
            f"{field}: {' '.join(messages)}"
            for field, messages in exc.message_dict.items()
        )
    return '; '.join(exc.messages)


def exception_handler(exc, context):
    """
    Translate exceptions into the marketplace error envelope.

    - ``DomainError`` subclasses get the HTTP status of their kind.
    - Django ``ValidationError`` (model ``save()`` checks) becomes
      ``validation_error``.
    - ``DatabaseError`` is logged with traceback and becomes ``store_error``.
    - DRF exceptions keep their status; serializer errors keep per-field
      detail under ``fields``.
    """
    if isinstance(exc, DjangoValidationError):
        exc = DomainValidationError(_django_validation_message(exc))
    elif isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.error(
            "Database failure in %s",
            view.__class__.__name__ if view is not None else 'unknown view',
            exc_info=exc,
        )
        exc = StoreError()

    if isinstance(exc, DomainError):
        set_rollback()
        return Response(
            {'error': exc.message, 'kind': exc.kind},
            status=KIND_STATUS.get(exc.kind, status.HTTP_400_BAD_REQUEST),
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    code = getattr(exc, 'default_code', 'error')
    payload = {
        'error': _first_message(getattr(exc, 'detail', str(exc))),
        'kind': KIND_ALIASES.get(code, code),
    }
    if isinstance(exc, drf_exceptions.ValidationError) and isinstance(exc.detail, dict):
        payload['fields'] = response.data

    response.data = payload
    return response
