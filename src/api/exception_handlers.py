"""Exception handlers for the API."""

import typing as t
from http import HTTPStatus

import structlog
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.http import HttpRequest
from ninja.responses import Response

from events.exceptions import EventDomainError

logger = structlog.get_logger(__name__)

INTEGRITY_REASON = "Integrity constraint has been violated."


def _error_body(status: int, code: str, reason: str, detail: str) -> dict[str, str]:
    return {"status": HTTPStatus(status).name, "code": code, "reason": reason, "detail": detail}


def handle_general_exception(request: HttpRequest, exc: Exception | t.Type[Exception]) -> Response:
    """Handle a general exception.

    Args:
        request: The incoming HTTP request.
        exc: The exception.

    Returns:
        The response.
    """
    logger.exception("INTERNAL_SERVER_ERROR", path=request.path, method=request.method)
    detail = str(exc) if settings.DEBUG else "Internal Server Error."
    return Response(
        status=500,
        data=_error_body(500, "INTERNAL_SERVER_ERROR", "Unexpected error.", detail),
    )


def handle_django_validation_error(request: HttpRequest, exc: ValidationError | t.Type[ValidationError]) -> Response:
    """Handle a validation error raised by ``full_clean``.

    Args:
        request: The incoming HTTP request.
        exc: The exception.
    """
    logger.warning("VALIDATION_ERROR", path=request.path, messages=exc.messages)  # type: ignore[union-attr]
    if hasattr(exc, "error_dict"):
        errors: dict[str, t.Any] = {k: [ee for e in v for ee in e] for k, v in exc.error_dict.items()}
    else:
        errors = {"__all__": exc.messages}  # type: ignore[union-attr]
    return Response(status=400, data={"errors": errors})


def handle_integrity_error(request: HttpRequest, exc: IntegrityError | t.Type[IntegrityError]) -> Response:
    """Handle a database constraint violation without leaking storage details."""
    logger.warning("INTEGRITY_ERROR", path=request.path, error=str(exc))
    return Response(
        status=409,
        data=_error_body(409, "CONFLICT", INTEGRITY_REASON, INTEGRITY_REASON),
    )


def handle_event_domain_error(request: HttpRequest, exc: EventDomainError | t.Type[EventDomainError]) -> Response:
    """Map a domain error to its status code and error body."""
    logger.info("DOMAIN_ERROR", path=request.path, code=exc.code, detail=str(exc))
    return Response(
        status=exc.status_code,
        data=_error_body(exc.status_code, exc.code, exc.reason, str(exc)),
    )
