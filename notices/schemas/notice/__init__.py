"""Notice schemas."""

from notices.schemas.notice.active_notices_response import ActiveNoticesResponse
from notices.schemas.notice.dismiss_request import DismissNoticeRequest
from notices.schemas.notice.dismiss_response import DismissNoticeResponse
from notices.schemas.notice.notice_button import NoticeButton
from notices.schemas.notice.notice_record import (
    NoticeDefaults,
    NoticeRecord,
    merge_notice,
)

__all__ = [
    "ActiveNoticesResponse",
    "DismissNoticeRequest",
    "DismissNoticeResponse",
    "NoticeButton",
    "NoticeDefaults",
    "NoticeRecord",
    "merge_notice",
]
