"""Unit tests for SecurityContextMiddleware."""

import unittest

from django.http import HttpRequest, HttpResponse

from notices.auth.context import get_current_user, set_current_user
from notices.auth.oauth2 import OAuth2User
from notices.middleware.security_context import SecurityContextMiddleware


class TestSecurityContextMiddleware(unittest.TestCase):
    """Test cases for SecurityContextMiddleware."""

    def setUp(self):
        self.user = OAuth2User("user-1", "admin-panel", [])

    def test_clears_user_set_during_request(self):
        def get_response(request):
            set_current_user(self.user)
            return HttpResponse("OK")

        SecurityContextMiddleware(get_response)(HttpRequest())

        self.assertIsNone(get_current_user())

    def test_clears_user_when_view_raises(self):
        def get_response(request):
            set_current_user(self.user)
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            SecurityContextMiddleware(get_response)(HttpRequest())

        self.assertIsNone(get_current_user())

    def test_stale_user_is_not_visible_to_next_request(self):
        set_current_user(self.user)
        seen = []

        def get_response(request):
            seen.append(get_current_user())
            return HttpResponse("OK")

        SecurityContextMiddleware(get_response)(HttpRequest())

        self.assertEqual(seen, [None])


if __name__ == "__main__":
    unittest.main()
