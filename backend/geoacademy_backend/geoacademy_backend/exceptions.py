import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    NotAuthenticated,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler


logger = logging.getLogger(__name__)


class DownstreamError(APIException):
    """Persistence or network failure; the message never carries internals."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Something went wrong. Please try again later."
    default_code = "downstream_error"


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    """Render every API error as {"message": ..., "errors": ...}."""
    view = context.get("view")
    view_name = view.__class__.__name__ if view else "unknown view"

    if isinstance(exc, DatabaseError):
        logger.exception(f"Database error in {view_name}: {exc}")
        exc = DownstreamError()

    response = exception_handler(exc, context)
    if response is None:
        logger.exception(f"Unhandled error in {view_name}: {exc}")
        exc = DownstreamError()
        response = exception_handler(exc, context)

    if isinstance(exc, ValidationError):
        message = getattr(view, "validation_message", None) or "Invalid data"
        errors = exc.detail if isinstance(exc.detail, dict) else {"non_field_errors": exc.detail}
        response.data = {"message": message, "errors": errors}
        return response

    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        message = "Unauthorized" if str(exc.detail) == str(exc.default_detail) else str(exc.detail)
        return Response({"message": message}, status=status.HTTP_401_UNAUTHORIZED)

    response.data = {"message": _first_message(response.data)}
    return response
