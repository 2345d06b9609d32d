"""Rendering of notice banners and the client-side dismiss trigger."""

from collections.abc import Mapping
from typing import Any

from django.template.loader import render_to_string
from django.utils.safestring import SafeString, mark_safe

import structlog

from notices.auth.context import get_current_user
from notices.constants import NOTICE_DISMISS_ACTION
from notices.enums import DismissScope
from notices.keys import notice_storage_key
from notices.schemas.notice import NoticeDefaults, NoticeRecord, merge_notice
from notices.services.flag_store import NoticeFlagStore, notice_flag_store
from notices.services.sanitizer import safe_url, sanitize_message

logger = structlog.get_logger(__name__)

NOTICE_TEMPLATE = "notices/notice.html"
DISMISS_SCRIPT_TEMPLATE = "notices/dismiss_script.html"


class NoticeRenderer:
    """Builds notice markup, hiding notices whose dismissed flag is set.

    Rendering only reads the flag store; it never writes and needs no
    request or session.
    """

    def __init__(self, flag_store: NoticeFlagStore | None = None):
        self.flag_store = flag_store or notice_flag_store

    def render(
        self,
        record: NoticeRecord | Mapping[str, Any],
        defaults: NoticeDefaults | None = None,
        *,
        user_id: str | None = None,
    ) -> SafeString | None:
        """Render one notice, or nothing if it should not be shown.

        Args:
            record: Notice to render; fields it sets win over ``defaults``.
            defaults: Baseline settings, ``NoticeDefaults()`` when omitted.
            user_id: Viewer identity for per-user flags. Falls back to the
                authenticated user of the current request.

        Returns:
            Banner markup, or None when ``show_if`` is false or the notice
            has been dismissed in its scope.
        """
        notice = merge_notice(record, defaults)
        if not notice.show_if:
            return None

        key = notice_storage_key(notice.id)
        if user_id is None and notice.dismissible_scope == DismissScope.USER:
            current_user = get_current_user()
            user_id = current_user.user_id if current_user else None

        if self.flag_store.is_dismissed(key, notice.dismissible_scope, user_id):
            logger.debug("Notice dismissed, not rendering", notice_key=key)
            return None

        return render_to_string(NOTICE_TEMPLATE, self.get_context(notice, key))

    def get_context(self, notice: NoticeRecord, key: str) -> dict[str, Any]:
        classes = [
            "notice-panel",
            "notice",
            notice.css_class,
            f"notice-{notice.type.value}",
        ]
        if notice.dismissible:
            classes.append("is-dismissible")

        return {
            "notice_key": key,
            "classes": " ".join(c for c in classes if c),
            "scope": notice.dismissible_scope.value,
            "dismissible": notice.dismissible,
            "ttl": notice.dismissible_ttl,
            "required": notice.required,
            "message": mark_safe(sanitize_message(notice.message)),  # noqa: S308
            "buttons": [
                {"url": safe_url(button.url), "label": button.label}
                for button in notice.buttons
            ],
        }

    def render_dismiss_script(self, *, token: str, endpoint_url: str) -> SafeString:
        """Render the script that posts dismiss requests.

        Emit it once per page, after the banners.

        Args:
            token: Security token for the viewing user.
            endpoint_url: URL of the dismiss endpoint.
        """
        return render_to_string(
            DISMISS_SCRIPT_TEMPLATE,
            {
                "action": NOTICE_DISMISS_ACTION,
                "endpoint_url": endpoint_url,
                "token": token,
            },
        )


notice_renderer = NoticeRenderer()
