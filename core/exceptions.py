# core/exceptions.py
import logging

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist, ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.db.models import ProtectedError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ConflictError(exceptions.APIException):
    """The entity is still referenced elsewhere or clashes with an existing one"""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'This record is still in use.'
    default_code = 'conflict'


class MissingScopeError(exceptions.ValidationError):
    """A mandatory scoping query parameter (location_id, ...) was not supplied"""
    default_code = 'missing_scope'

    def __init__(self, param):
        super().__init__({param: [f'{param} is required']})


def protected_message(exc):
    """Human readable 'still in use' message naming the referencing models"""
    names = sorted({
        obj._meta.verbose_name_plural for obj in exc.protected_objects
    })
    if not names:
        return ConflictError.default_detail
    return f"Cannot delete: still in use by {', '.join(str(n) for n in names)}."


def first_error_message(detail):
    """Flatten DRF error detail into the single string carried by the envelope"""
    if isinstance(detail, dict):
        if not detail:
            return 'Validation error'
        field, value = next(iter(detail.items()))
        message = first_error_message(value)
        if field in ('non_field_errors', 'detail'):
            return message
        return f"{field}: {message}"
    if isinstance(detail, (list, tuple)):
        if not detail:
            return 'Validation error'
        return first_error_message(detail[0])
    return str(detail)


def _has_code(codes, code):
    if isinstance(codes, dict):
        return any(_has_code(value, code) for value in codes.values())
    if isinstance(codes, (list, tuple)):
        return any(_has_code(value, code) for value in codes)
    return codes == code


def custom_exception_handler(exc, context):
    """
    Wrap every error into the {success: false, error: ...} envelope.

    ProtectedError and uniqueness violations become 409 so callers can tell
    "still in use" / "already exists" apart from generic failures.
    """
    if isinstance(exc, ProtectedError):
        logger.warning(f"Rejected delete of referenced record: {exc}")
        exc = ConflictError(protected_message(exc))
    elif isinstance(exc, IntegrityError):
        logger.warning(f"Integrity Error: {exc}")
        exc = ConflictError('This operation violates a uniqueness or reference constraint.')
    elif isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(
            exc.message_dict if hasattr(exc, 'error_dict') else exc.messages)
    elif isinstance(exc, ObjectDoesNotExist):
        exc = exceptions.NotFound(str(exc) or 'Not found.')

    response = exception_handler(exc, context)

    if response is not None:
        status_code = response.status_code
        if isinstance(exc, exceptions.ValidationError) and _has_code(exc.get_codes(), 'unique'):
            status_code = status.HTTP_409_CONFLICT

        response.data = {
            'success': False,
            'error': first_error_message(response.data),
            'details': response.data,
        }
        response.status_code = status_code
        return response

    logger.error(f"Unexpected Error: {exc}", exc_info=exc)
    return Response({
        'success': False,
        'error': str(exc) if settings.DEBUG else 'An unexpected error occurred',
    }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
