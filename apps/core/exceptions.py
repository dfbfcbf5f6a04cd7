"""
API error taxonomy and the DRF exception handler that renders every failure
as ``{"error": str, "details"?: ...}``.

- ValidationError (DRF)      -> 400
- StoreMismatch              -> 403
- NotFoundOrUnauthorized     -> 404
- UpstreamStoreError         -> 500 (database/driver failures)
"""

import logging

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class NotFoundOrUnauthorized(exceptions.NotFound):
    """Referenced entity does not exist or belongs to another store."""
    default_detail = 'Not found or unauthorized'
    default_code = 'not_found'


class StoreMismatch(exceptions.PermissionDenied):
    """Entity exists but is owned by a different store."""
    default_detail = 'Unauthorized'
    default_code = 'unauthorized'


class UpstreamStoreError(exceptions.APIException):
    """The relational store rejected or failed an operation."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'upstream_error'


def _first_message(detail):
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ('non_field_errors', 'detail'):
                return message
            return f"{field}: {message}"
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def api_exception_handler(exc, context):
    """
    Wrap DRF's default handler so all error bodies share one envelope.

    Database errors are logged and reported as 500 with the driver message;
    anything else DRF does not know about becomes a generic 500.
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view else '?'

    if isinstance(exc, DatabaseError):
        logger.error(f"Database error in {view_name}: {exc}", exc_info=exc)
        exc = UpstreamStoreError(str(exc))

    response = exception_handler(exc, context)

    if response is None:
        logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    detail = exc.detail if isinstance(exc, exceptions.APIException) else response.data
    body = {'error': _first_message(detail)}

    if isinstance(detail, dict) and not (len(detail) == 1 and 'detail' in detail):
        body['details'] = detail
    elif isinstance(detail, list) and len(detail) > 1:
        body['details'] = detail

    response.data = body
    return response
