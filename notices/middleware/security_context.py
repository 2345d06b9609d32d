"""Security context middleware for authenticated user access."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from notices.auth.context import clear_current_user


class SecurityContextMiddleware:
    """Guarantee the thread-local security context is empty between requests.

    DRF authenticates inside the view, so the user is stored by
    ``NoticeAPIView.initial`` once authentication has run. This middleware
    owns the cleanup so a worker thread never leaks one user's identity into
    the next request, even when the view raises.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        clear_current_user()
        try:
            return self.get_response(request)
        finally:
            clear_current_user()
