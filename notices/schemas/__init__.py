"""Pydantic schemas for the notices app."""

from notices.schemas.base_schema_model import BaseSchemaModel
from notices.schemas.notice import (
    ActiveNoticesResponse,
    DismissNoticeRequest,
    DismissNoticeResponse,
    NoticeButton,
    NoticeDefaults,
    NoticeRecord,
    merge_notice,
)

__all__ = [
    "ActiveNoticesResponse",
    "BaseSchemaModel",
    "DismissNoticeRequest",
    "DismissNoticeResponse",
    "NoticeButton",
    "NoticeDefaults",
    "NoticeRecord",
    "merge_notice",
]
