"""Global exception handler for the notice panel API."""

from datetime import UTC, datetime
from typing import Any

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from notices.exceptions.notice_exceptions import NoticeError, StoreWriteError
from notices.logging.context import get_request_id

logger = structlog.get_logger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Notice dismissal failures, and every failure of a view that sets
    ``success_only_errors``, are answered with the bare
    ``{"success": false}`` contract so no validation detail reaches the
    client. Other API errors keep the default DRF body; anything unhandled
    gets the standard envelope: ``{status, message, request_id, timestamp}``.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object describing the failure.
    """
    view = context.get("view")
    request = getattr(view, "request", None) if view else None
    request_id = get_request_id()

    if isinstance(exc, NoticeError):
        response = Response({"success": False}, status=exc.status_code)
    else:
        response = exception_handler(exc, context)

    if response is None:
        response = Response(
            {
                "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "message": "An internal server error occurred.",
                "request_id": request_id,
                "timestamp": datetime.now(UTC).isoformat(),
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if getattr(view, "success_only_errors", False):
        response.data = {"success": False}

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log the failure; 4xx as warnings, everything else as errors."""
    fields = {
        "error_type": type(exc).__name__,
        "error": str(exc),
        "method": getattr(request, "method", "unknown"),
        "path": getattr(request, "path", "unknown"),
        "status_code": response.status_code,
    }

    if isinstance(exc, StoreWriteError) or response.status_code >= 500:
        logger.error("Request failed", exc_info=exc, **fields)
    else:
        logger.warning("Request failed", **fields)
