"""Exceptions raised while dismissing notices."""

from rest_framework import status


class NoticeError(Exception):
    """Base class for notice dismissal failures.

    Every subclass is terminal for a single dismiss call and is reported to
    the client as ``{"success": false}`` with ``status_code``.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Notice could not be dismissed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(NoticeError):
    """The anti-forgery token is missing, malformed, expired or not ours."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid security token"


class MissingNoticeIdError(NoticeError):
    """The submitted notice id is empty once sanitized."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing notice id"


class StoreWriteError(NoticeError):
    """The backing flag store rejected the write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to persist dismissed flag"
