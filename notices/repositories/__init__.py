"""Repositories for the notices app."""

from notices.repositories.dismissed_notice_repository import (
    DismissedNoticeRepository,
)

__all__ = ["DismissedNoticeRepository"]
