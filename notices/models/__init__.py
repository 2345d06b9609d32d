"""Models for the notices app."""

from notices.models.dismissed_notice import DismissedNotice

__all__ = ["DismissedNotice"]
