"""Services for the notices app."""

from notices.services.flag_store import (
    NoticeFlagStore,
    SharedFlagStore,
    UserFlagStore,
    notice_flag_store,
)
from notices.services.notice_dismissal_service import (
    NoticeDismissalService,
    notice_dismissal_service,
)
from notices.services.notice_registry import NoticeRegistry, notice_registry
from notices.services.notice_renderer import NoticeRenderer, notice_renderer
from notices.services.token_service import NoticeTokenService, notice_token_service

__all__ = [
    "NoticeDismissalService",
    "NoticeFlagStore",
    "NoticeRegistry",
    "NoticeRenderer",
    "NoticeTokenService",
    "SharedFlagStore",
    "UserFlagStore",
    "notice_dismissal_service",
    "notice_flag_store",
    "notice_registry",
    "notice_renderer",
    "notice_token_service",
]
