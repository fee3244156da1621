"""
Error taxonomy and error body normalization for the API.

Every error response is shaped as::

    {"code": <http status>, "message": <summary>, "errors": {...}}

``errors`` is only present for validation failures and maps field names to
lists of messages. Reads of hidden posts raise ``NotFoundError`` rather than
``AuthorizationError`` so drafts and scheduled posts never leak.
"""

from __future__ import annotations

import logging
from typing import Any

from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions
from rest_framework import status
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = _("The given data was invalid.")


class ValidationError(exceptions.ValidationError):
    """Missing or malformed input."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class AuthorizationError(exceptions.PermissionDenied):
    """The caller lacks the capability required for this action."""

    default_detail = _("This action is unauthorized.")
    default_code = "unauthorized_action"


class NotFoundError(exceptions.NotFound):
    """The entity is absent, or hidden from the caller."""


def exception_handler(exc: Exception, context: dict[str, Any]):
    """
    Wrap DRF's handler so every error body uses the same envelope.

    Plain DRF validation errors (raised by ``serializer.is_valid``) are
    promoted to our 422 ``ValidationError``.
    """
    if isinstance(exc, exceptions.ValidationError) and not isinstance(
        exc,
        ValidationError,
    ):
        exc = ValidationError(exc.detail)

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    view = context.get("view")
    logger.info(
        "API request rejected with %s in %s: %s",
        response.status_code,
        type(view).__name__ if view is not None else "unknown view",
        type(exc).__name__,
    )

    if isinstance(exc, ValidationError):
        errors = response.data
        if not isinstance(errors, dict):
            errors = {api_settings.NON_FIELD_ERRORS_KEY: errors}
        response.data = {
            "code": response.status_code,
            "message": str(VALIDATION_MESSAGE),
            "errors": errors,
        }
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {
        "code": response.status_code,
        "message": str(detail) if detail is not None else str(exc),
    }
    return response
