"""Stores backing the per-notice dismissed flag."""

from django.conf import settings
from django.core.cache import caches
from django.db import DatabaseError

import structlog

from notices.constants import DEFAULT_DISMISSIBLE_TTL
from notices.enums import DismissScope
from notices.exceptions import StoreWriteError
from notices.repositories import DismissedNoticeRepository

logger = structlog.get_logger(__name__)


class UserFlagStore:
    """Durable per-user flags kept in the ``dismissed_notices`` table."""

    def __init__(self, repository: type[DismissedNoticeRepository] | None = None):
        self.repository = repository or DismissedNoticeRepository

    def is_dismissed(self, key: str, user_id: str) -> bool:
        return self.repository.is_dismissed(user_id, key)

    def mark_dismissed(self, key: str, user_id: str) -> None:
        """Persist the flag for one user.

        Raises:
            StoreWriteError: If the database rejects the write.
        """
        try:
            self.repository.mark_dismissed(user_id, key)
        except DatabaseError as e:
            raise StoreWriteError(f"Per-user flag write failed: {e!s}") from e


class SharedFlagStore:
    """Process-wide flags in the Django cache, expiring after a TTL.

    Keys are namespaced with NOTICE_FLAG_CACHE_PREFIX since the notice key
    arrives from an untrusted client.
    """

    def __init__(self, cache_alias: str | None = None):
        self.cache_alias = cache_alias

    @property
    def cache(self):
        return caches[self.cache_alias or settings.NOTICE_FLAG_CACHE_ALIAS]

    def cache_key(self, key: str) -> str:
        return f"{settings.NOTICE_FLAG_CACHE_PREFIX}{key}"

    def is_dismissed(self, key: str) -> bool:
        return bool(self.cache.get(self.cache_key(key)))

    def mark_dismissed(self, key: str, ttl: int) -> None:
        """Persist the flag for everyone until ``ttl`` seconds have passed.

        Raises:
            StoreWriteError: If the cache backend fails.
        """
        try:
            self.cache.set(self.cache_key(key), True, timeout=ttl)
        except Exception as e:
            raise StoreWriteError(f"Shared flag write failed: {e!s}") from e


class NoticeFlagStore:
    """Dispatches flag reads and writes to the store selected by scope."""

    def __init__(
        self,
        user_store: UserFlagStore | None = None,
        shared_store: SharedFlagStore | None = None,
    ):
        self.user_store = user_store or UserFlagStore()
        self.shared_store = shared_store or SharedFlagStore()

    def is_dismissed(
        self, key: str, scope: DismissScope, user_id: str | None = None
    ) -> bool:
        """Read a flag, treating any store failure as "not dismissed".

        A notice whose state cannot be read is shown rather than hidden.
        Per-user lookups without a user are never dismissed.
        """
        try:
            if scope == DismissScope.USER:
                if not user_id:
                    return False
                return self.user_store.is_dismissed(key, user_id)
            return self.shared_store.is_dismissed(key)
        except Exception as e:
            logger.warning(
                "Dismissed flag read failed, showing notice",
                notice_key=key,
                scope=scope.value,
                error=str(e),
            )
            return False

    def mark_dismissed(
        self,
        key: str,
        scope: DismissScope,
        *,
        user_id: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Write a truthy flag in the store selected by ``scope``.

        Raises:
            StoreWriteError: If the write fails or a per-user write has
                no user to attach to.
        """
        if scope == DismissScope.USER:
            if not user_id:
                raise StoreWriteError("Per-user flag write requires a user")
            self.user_store.mark_dismissed(key, user_id)
        else:
            self.shared_store.mark_dismissed(key, ttl or DEFAULT_DISMISSIBLE_TTL)

        logger.info(
            "Dismissed flag written",
            notice_key=key,
            scope=scope.value,
            user_id=user_id,
            ttl=ttl if scope == DismissScope.TRANSIENT else None,
        )


notice_flag_store = NoticeFlagStore()
