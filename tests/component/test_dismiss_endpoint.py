"""Component tests for the dismiss endpoint.

These drive the full request cycle: bearer authentication, token
verification, the flag stores and the exception handler.
"""

import time
from unittest.mock import patch
from urllib.parse import urlencode

from django.urls import reverse

from rest_framework import status

from notices.constants import NOTICE_KEY_MAX_LENGTH
from notices.exceptions import StoreWriteError
from notices.models import DismissedNotice
from notices.services.flag_store import SharedFlagStore
from notices.services.notice_registry import notice_registry
from notices.services.token_service import notice_token_service
from tests.base import BaseComponentTest


class TestDismissNoticeEndpoint(BaseComponentTest):
    """POST /api/v1/notices/dismiss."""

    def setUp(self):
        self.url = reverse("notices-dismiss")
        self.active_url = reverse("notices-active")

    def _dismiss(self, user_id, token=None, **fields):
        form = {
            "action": "dismiss-notice",
            "id": "notice-update-v2",
            "meta": "transient",
            "time": "604800",
            "is_required": "0",
            "token": notice_token_service.create_token(user_id)
            if token is None
            else token,
        }
        form.update(fields)
        return self.client.post(
            self.url,
            data=urlencode(form),
            content_type="application/x-www-form-urlencoded",
            **self.auth_headers(user_id),
        )

    def _active_html(self, user_id):
        response = self.client.get(self.active_url, **self.auth_headers(user_id))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return response.json()["html"]

    def test_shared_dismissal_hides_notice_until_ttl_expires(self):
        notice_registry.register(
            {
                "id": "update-v2",
                "dismissible": True,
                "dismissible_scope": "transient",
                "dismissible_ttl": 604800,
                "message": "Version 2 is available.",
            }
        )
        self.assertIn('id="notice-update-v2"', self._active_html("user-a"))

        start = time.time()
        response = self._dismiss("user-a")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"success": True})
        self.assertNotIn("notice-update-v2", self._active_html("user-a"))
        self.assertNotIn("notice-update-v2", self._active_html("user-b"))

        with patch("time.time", return_value=start + 604800 + 1):
            self.assertIn('id="notice-update-v2"', self._active_html("user-b"))

    def test_per_user_dismissal_is_isolated(self):
        notice_registry.register(
            {"id": "welcome", "dismissible": True, "dismissible_scope": "user"}
        )

        response = self._dismiss("user-a", id="notice-welcome", meta="user")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn("notice-welcome", self._active_html("user-a"))
        self.assertIn('id="notice-welcome"', self._active_html("user-b"))
        self.assertTrue(
            DismissedNotice.objects.filter(
                user_id="user-a", notice_key="notice-welcome"
            ).exists()
        )

    def test_repeated_dismissal_is_idempotent(self):
        for _ in range(2):
            response = self._dismiss("user-a", id="notice-welcome", meta="user")
            self.assertEqual(response.json(), {"success": True})

        self.assertEqual(
            DismissedNotice.objects.filter(
                user_id="user-a", notice_key="notice-welcome"
            ).count(),
            1,
        )

    def test_required_notice_is_acknowledged_without_write(self):
        notice_registry.register(
            {"id": "license", "dismissible": True, "required": True}
        )

        response = self._dismiss(
            "user-a", id="notice-license", meta="user", is_required="1"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"success": True})
        self.assertFalse(DismissedNotice.objects.exists())
        self.assertIn('id="notice-license"', self._active_html("user-a"))

    def test_registered_required_notice_ignores_client_flag(self):
        notice_registry.register(
            {"id": "license", "dismissible": True, "required": True}
        )

        response = self._dismiss(
            "user-a", id="notice-license", meta="user", is_required="0"
        )

        self.assertEqual(response.json(), {"success": True})
        self.assertFalse(DismissedNotice.objects.exists())

    def test_invalid_token_is_rejected(self):
        response = self._dismiss("user-a", token="not-a-token")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json(), {"success": False})
        self.assertIsNone(SharedFlagStore().cache.get("notice-flag:notice-update-v2"))

    def test_token_issued_to_another_user_is_rejected(self):
        token = notice_token_service.create_token("user-b")

        response = self._dismiss("user-a", token=token, meta="user")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(DismissedNotice.objects.exists())

    def test_missing_id_is_rejected(self):
        response = self._dismiss("user-a", id="")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"success": False})

    def test_id_with_only_invalid_characters_is_rejected(self):
        response = self._dismiss("user-a", id="!!!")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_store_failure_returns_500(self):
        with patch.object(
            SharedFlagStore, "mark_dismissed", side_effect=StoreWriteError()
        ):
            response = self._dismiss("user-a")

        self.assertEqual(
            response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        self.assertEqual(response.json(), {"success": False})

    def test_json_body_is_accepted(self):
        response = self.client.post(
            self.url,
            data={
                "action": "dismiss-notice",
                "id": "notice-welcome",
                "meta": "user",
                "is_required": False,
                "token": notice_token_service.create_token("user-a"),
            },
            content_type="application/json",
            **self.auth_headers("user-a"),
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(
            DismissedNotice.objects.filter(
                user_id="user-a", notice_key="notice-welcome"
            ).exists()
        )

    def test_client_trigger_fields_alone_authenticate(self):
        notice_registry.register(
            {"id": "welcome", "dismissible": True, "dismissible_scope": "user"}
        )
        form = {
            "action": "dismiss-notice",
            "id": "notice-welcome",
            "meta": "user",
            "time": "",
            "is_required": "0",
            "token": notice_token_service.create_token("user-a"),
        }

        response = self.client.post(
            self.url,
            data=urlencode(form),
            content_type="application/x-www-form-urlencoded",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"success": True})
        self.assertTrue(
            DismissedNotice.objects.filter(
                user_id="user-a", notice_key="notice-welcome"
            ).exists()
        )
        self.assertNotIn("notice-welcome", self._active_html("user-a"))

    def test_invalid_token_without_bearer_is_rejected(self):
        response = self.client.post(
            self.url,
            data=urlencode({"id": "notice-welcome", "token": "not-a-token"}),
            content_type="application/x-www-form-urlencoded",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json(), {"success": False})
        self.assertFalse(DismissedNotice.objects.exists())

    def test_unauthenticated_request_is_rejected(self):
        response = self.client.post(
            self.url,
            data=urlencode({"id": "notice-welcome"}),
            content_type="application/x-www-form-urlencoded",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json(), {"success": False})

    def test_foreign_action_is_rejected(self):
        response = self._dismiss("user-a", action="delete-notice")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"success": False})

    def test_overlong_id_is_rejected_before_the_store(self):
        response = self._dismiss(
            "user-a", id="n" * (NOTICE_KEY_MAX_LENGTH + 1), meta="user"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"success": False})
        self.assertFalse(DismissedNotice.objects.exists())
