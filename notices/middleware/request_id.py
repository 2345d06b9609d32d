"""Request ID middleware for log correlation."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from notices.constants import REQUEST_ID_HEADER
from notices.logging.context import clear_request_id, set_request_id


class RequestIDMiddleware:
    """Propagate or generate an X-Request-ID for every request.

    The ID is stored in thread-local storage for the structlog processors,
    attached to ``request.request_id`` and echoed in the response headers.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_id()
