"""Per-user dismissed notice flags."""

from typing import ClassVar

from django.db import models

from notices.constants import NOTICE_KEY_MAX_LENGTH


class DismissedNotice(models.Model):
    """A notice a specific user has dismissed.

    Rows never expire; deleting the row makes the notice visible again for
    that user.

    Attributes:
        user_id: Identity of the user (the ``sub`` of their access token).
        notice_key: Storage key of the notice, e.g. ``notice-update-v2``.
        dismissed: Flag value; rendering hides the notice while it is true.
        dismissed_at: When the flag was last written.
    """

    user_id = models.CharField(
        max_length=191,
        db_index=True,
        help_text="User who dismissed the notice",
    )
    notice_key = models.CharField(
        max_length=NOTICE_KEY_MAX_LENGTH,
        help_text="Storage key of the dismissed notice",
    )
    dismissed = models.BooleanField(
        default=True,
        help_text="Whether the notice is currently hidden for this user",
    )
    dismissed_at = models.DateTimeField(
        auto_now=True,
        help_text="When the flag was last written",
    )

    class Meta:
        """Django model metadata."""

        db_table = "dismissed_notices"
        constraints: ClassVar[list] = [
            models.UniqueConstraint(
                fields=["user_id", "notice_key"],
                name="ux_dismissed_notices_user_key",
            ),
        ]

    def __str__(self):
        return f"DismissedNotice(user_id={self.user_id}, key={self.notice_key})"
