from __future__ import annotations

from typing import Any, Dict, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response, status_for_code
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

INVALID_BODY_MESSAGE = "invalid request body"
SERVER_ERROR_MESSAGE = "internal server error"


class ApplicationError(Exception):
    """
    Domain-level error raised from commands, services or views.

    Args:
        code: Machine readable error code (``VALIDATION_ERROR``, ``NOT_FOUND``, ...).
        message: Human readable explanation; sent to the client as-is.
        status_code: Optional explicit HTTP status. If omitted, code mapping is used.
        details: Optional structured context, logged but not rendered.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details

    @property
    def http_status(self) -> int:
        if self.status_code is not None:
            return int(self.status_code)
        return status_for_code(self.code)

    def to_response(self) -> Response:
        return error_response(self.code, self.message, http_status=self.http_status)


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central DRF exception handler rendering every failure as ``{"error": message}``.
    """

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        if exc.http_status >= 500:
            bound_logger.error(
                "Application error",
                code=exc.code,
                status=exc.http_status,
                detail=exc.message,
            )
        else:
            bound_logger.info(
                "Handled application error",
                code=exc.code,
                status=exc.http_status,
                details=exc.details,
            )
        return exc.to_response()

    if isinstance(exc, (ParseError, UnsupportedMediaType)):
        bound_logger.info("Rejected malformed request body", reason=str(exc))
        return error_response("VALIDATION_ERROR", INVALID_BODY_MESSAGE)

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_flatten_django_validation_error(exc))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        SERVER_ERROR_MESSAGE,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    if isinstance(exc, (NotFound, Http404)):
        code = "NOT_FOUND"
    elif isinstance(exc, ValidationError):
        code = "VALIDATION_ERROR"
    elif status_code >= 500:
        code = "SERVER_ERROR"
    else:
        code = "REQUEST_ERROR"
    message = _extract_message(response.data, exc)
    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)
    headers = {
        key: value
        for key, value in (getattr(response, "headers", None) or {}).items()
        if key.lower() in ("allow", "retry-after", "www-authenticate")
    }
    return error_response(code, message, http_status=status_code, headers=headers or None)


def _flatten_django_validation_error(exc: DjangoValidationError):
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    return list(exc.messages)


def _extract_message(payload: Any, exc: Exception) -> str:
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str) and detail:
            return str(detail)
        for field, errors in payload.items():
            if isinstance(errors, (list, tuple)) and errors:
                return f"{field}: {errors[0]}"
            if isinstance(errors, str) and errors:
                return f"{field}: {errors}"
    if isinstance(payload, (list, tuple)) and payload and isinstance(payload[0], str):
        return str(payload[0])
    if isinstance(payload, str) and payload:
        return payload
    if isinstance(exc, APIException):
        return str(exc.default_detail)
    return "request failed"


__all__ = ["ApplicationError", "global_exception_handler"]
