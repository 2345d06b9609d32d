"""Registry of notices declared by the hosting application."""

from collections.abc import Mapping
from typing import Any

import structlog

from notices.keys import notice_storage_key
from notices.schemas.notice import NoticeDefaults, NoticeRecord, merge_notice

logger = structlog.get_logger(__name__)


class NoticeRegistry:
    """Notices known to the server, keyed by storage key.

    The hosting application registers its notices explicitly at startup
    (typically from ``AppConfig.ready``). The registry is also the
    server-side source of truth for ``required``: a notice registered as
    required is never dismissed, whatever the client reports.
    """

    def __init__(self) -> None:
        self._notices: dict[str, NoticeRecord] = {}

    def register(
        self,
        record: NoticeRecord | Mapping[str, Any],
        defaults: NoticeDefaults | None = None,
    ) -> NoticeRecord:
        """Merge a notice over defaults and register it.

        Registering the same id again replaces the earlier notice.

        Returns:
            The merged NoticeRecord that was stored.
        """
        notice = merge_notice(record, defaults)
        key = notice_storage_key(notice.id)
        if key in self._notices:
            logger.info("Replacing registered notice", notice_key=key)
        self._notices[key] = notice
        logger.debug(
            "Notice registered",
            notice_key=key,
            scope=notice.dismissible_scope.value,
            required=notice.required,
        )
        return notice

    def unregister(self, notice_id: str) -> bool:
        """Remove a notice by id. Returns False if it was not registered."""
        return self._notices.pop(notice_storage_key(notice_id), None) is not None

    def get(self, key: str) -> NoticeRecord | None:
        return self._notices.get(key)

    def all(self) -> list[NoticeRecord]:
        return list(self._notices.values())

    def is_required(self, key: str) -> bool:
        notice = self._notices.get(key)
        return notice is not None and notice.required

    def clear(self) -> None:
        self._notices.clear()


notice_registry = NoticeRegistry()
