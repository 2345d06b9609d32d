"""Custom exceptions for the notices app."""

from notices.exceptions.notice_exceptions import (
    InvalidTokenError,
    MissingNoticeIdError,
    NoticeError,
    StoreWriteError,
)

__all__ = [
    "InvalidTokenError",
    "MissingNoticeIdError",
    "NoticeError",
    "StoreWriteError",
]
