"""Custom exception handling to enforce the API error envelope."""

import logging
from typing import Any

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        # Common DRF pattern: {"detail": "..."}
        return [payload["detail"]]
    return [payload]


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap DRF errors in `{ "data": null, "errors": [...] }` shape.

    - Uses DRF's default handler to produce the base response.
    - Anonymous callers always get 401 with a fixed message.
    - Database failures become 503 instead of Django's HTML 500 page.
    """

    if isinstance(exc, DatabaseError):
        logger.exception("Database error while handling %s", context.get("view"))
        return Response(
            {"data": None, "errors": ["Service temporarily unavailable."]},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = drf_exception_handler(exc, context)

    if response is None:
        return response

    # Session authentication has no WWW-Authenticate header, so DRF would
    # answer 403 for anonymous requests.
    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code >= 400:
        if response.status_code == status.HTTP_401_UNAUTHORIZED:
            errors = ["Authentication credentials were not provided or are invalid."]
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            errors = ["You do not have permission to perform this action."]
        else:
            errors = _normalize_errors(response.data)

        response.data = {"data": None, "errors": errors}

    return response
