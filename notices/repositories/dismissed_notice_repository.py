"""Repository for per-user dismissed notice queries."""

from notices.models import DismissedNotice


class DismissedNoticeRepository:
    """Encapsulates the ORM access behind the per-user flag store."""

    @staticmethod
    def is_dismissed(user_id: str, notice_key: str) -> bool:
        """Check whether a user has a truthy dismissed flag for a notice.

        Args:
            user_id: Identity of the user
            notice_key: Storage key of the notice

        Returns:
            True if a row exists with ``dismissed`` set, False otherwise
        """
        return DismissedNotice.objects.filter(
            user_id=user_id, notice_key=notice_key, dismissed=True
        ).exists()

    @staticmethod
    def mark_dismissed(user_id: str, notice_key: str) -> DismissedNotice:
        """Set the dismissed flag for a user, creating the row if needed.

        Repeated calls leave a single row behind.

        Args:
            user_id: Identity of the user
            notice_key: Storage key of the notice

        Returns:
            The stored DismissedNotice row
        """
        dismissed_notice, _ = DismissedNotice.objects.update_or_create(
            user_id=user_id,
            notice_key=notice_key,
            defaults={"dismissed": True},
        )
        return dismissed_notice
