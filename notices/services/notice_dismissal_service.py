"""Service handling dismiss requests posted by the client trigger."""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from notices.enums import DismissOutcome
from notices.exceptions import MissingNoticeIdError, NoticeError
from notices.keys import sanitize_key
from notices.schemas.notice import DismissNoticeRequest
from notices.services.flag_store import NoticeFlagStore, notice_flag_store
from notices.services.notice_registry import NoticeRegistry, notice_registry
from notices.services.token_service import NoticeTokenService, notice_token_service

logger = structlog.get_logger(__name__)


class NoticeDismissalService:
    """Validates a dismiss submission and persists the dismissed flag."""

    def __init__(
        self,
        flag_store: NoticeFlagStore | None = None,
        token_service: NoticeTokenService | None = None,
        registry: NoticeRegistry | None = None,
    ):
        self.flag_store = flag_store or notice_flag_store
        self.token_service = token_service or notice_token_service
        self.registry = registry or notice_registry

    def dismiss(
        self, payload: Mapping[str, Any], user_id: str | None
    ) -> DismissOutcome:
        """Process one dismiss submission.

        Steps, each of which may end the call:
        1. verify the security token (nothing else is read before this);
        2. acknowledge required notices without writing anything. A notice
           is required when the client reports it so or when it was
           registered as required; the client flag can only turn a
           request into a no-op;
        3. reject an id that is empty once sanitized;
        4. write the flag in the per-user or shared store.

        Args:
            payload: Untrusted submission with ``id``, ``meta``, ``time``,
                ``is_required`` and ``token``.
            user_id: Identity of the authenticated caller.

        Returns:
            ACCEPTED when a flag was written, ACCEPTED_NOOP for required
            notices.

        Raises:
            InvalidTokenError: If the token does not verify.
            NoticeError: If the action is foreign or the id is too long.
            MissingNoticeIdError: If the id is empty.
            StoreWriteError: If the store rejects the write.
        """
        self.token_service.verify_token(payload.get("token"), user_id)

        try:
            request = DismissNoticeRequest.model_validate(payload)
        except ValidationError as e:
            logger.warning("Malformed dismiss request", validation_errors=e.errors())
            raise NoticeError("Malformed dismiss request") from e

        key = sanitize_key(request.id)

        if request.is_required or self.registry.is_required(key):
            logger.info("Required notice, dismissal ignored", notice_key=key)
            return DismissOutcome.ACCEPTED_NOOP

        if not key:
            raise MissingNoticeIdError()

        self.flag_store.mark_dismissed(
            key, request.meta, user_id=user_id, ttl=request.time
        )
        return DismissOutcome.ACCEPTED


notice_dismissal_service = NoticeDismissalService()
