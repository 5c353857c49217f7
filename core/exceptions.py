"""
Global exception handler for the REST API.
Renders domain errors, validation errors and unexpected failures as
RFC 7807 problem details (application/problem+json).
"""

import logging
from typing import Any, Optional

from django.http import Http404
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.catalog.domain.exceptions import DuplicateCode, NotFound
from apps.exchange.domain.exceptions import RateUnavailable


logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"

DOMAIN_ERROR_TITLE = "Product Service Error"
DOMAIN_ERROR_STATUS = {
    DuplicateCode: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    RateUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def problem_response(
    request,
    status_code: int,
    title: str,
    detail: str,
    errors: Optional[Any] = None,
    include_timestamp: bool = True,
) -> Response:
    body = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.path if request is not None else None,
    }
    if errors:
        body["errors"] = errors
    if include_timestamp:
        body["timestamp"] = timezone.now().isoformat()
    return Response(body, status=status_code, content_type=PROBLEM_CONTENT_TYPE)


def _field_errors(detail: Any) -> dict:
    """Flatten DRF validation details to {field: first message}."""
    if not isinstance(detail, dict):
        return {"non_field_errors": str(detail[0]) if isinstance(detail, list) and detail else str(detail)}

    errors = {}
    for field, messages in detail.items():
        if isinstance(messages, list) and messages:
            errors[field] = str(messages[0])
        else:
            errors[field] = str(messages)
    return errors


def problem_details_handler(exc: Exception, context: dict) -> Optional[Response]:
    """DRF EXCEPTION_HANDLER rendering every error as problem details."""
    request = context.get("request")

    for error_class, status_code in DOMAIN_ERROR_STATUS.items():
        if isinstance(exc, error_class):
            logger.error("Product service error: %s", exc)
            return problem_response(request, status_code, DOMAIN_ERROR_TITLE, str(exc))

    if isinstance(exc, exceptions.ValidationError):
        logger.error("Validation error: %s", exc.detail)
        return problem_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation failed",
            "One or more fields are invalid. See 'errors' for details.",
            errors=_field_errors(exc.detail),
        )

    if isinstance(exc, exceptions.MethodNotAllowed):
        logger.error("Method not allowed: %s", exc.detail)
        return problem_response(
            request, exc.status_code, "Method Not Allowed", str(exc.detail)
        )

    response = exception_handler(exc, context)
    if response is not None:
        # Remaining DRF/Django HTTP errors (404, 401, 403, 415...)
        if isinstance(exc, Http404):
            detail = "Not found."
        else:
            detail = str(getattr(exc, "detail", exc))
        logger.warning("HTTP exception: %s", detail)
        return problem_response(
            request, response.status_code, response.status_text, detail
        )

    logger.exception("Unexpected error: %s", exc)
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred. Please try again later.",
        include_timestamp=False,
    )
