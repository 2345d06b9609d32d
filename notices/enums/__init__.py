"""Enumerations for the notices app."""

from notices.enums.notice import DismissOutcome, DismissScope, NoticeType

__all__ = ["DismissOutcome", "DismissScope", "NoticeType"]
