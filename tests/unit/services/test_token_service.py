"""Unit tests for NoticeTokenService."""

from datetime import UTC, datetime, timedelta

from django.conf import settings
from django.test import SimpleTestCase

import jwt

from notices.exceptions import InvalidTokenError
from notices.services.token_service import NoticeTokenService


class TestNoticeTokenService(SimpleTestCase):
    """Tests for issuing and verifying dismissal tokens."""

    def setUp(self):
        self.service = NoticeTokenService()

    def test_round_trip_for_same_user(self):
        token = self.service.create_token("user-1")
        self.service.verify_token(token, "user-1")

    def test_token_claims(self):
        token = self.service.create_token("user-1")
        payload = jwt.decode(token, settings.NOTICE_TOKEN_SECRET, algorithms=["HS256"])

        self.assertEqual(payload["sub"], "user-1")
        self.assertEqual(payload["act"], "dismiss-notice")
        self.assertEqual(payload["exp"] - payload["iat"], settings.NOTICE_TOKEN_TTL)

    def test_missing_token_is_rejected(self):
        for token in (None, ""):
            with self.subTest(token=token), self.assertRaises(InvalidTokenError):
                self.service.verify_token(token, "user-1")

    def test_missing_user_is_rejected(self):
        token = self.service.create_token("user-1")
        with self.assertRaises(InvalidTokenError):
            self.service.verify_token(token, None)

    def test_token_of_another_user_is_rejected(self):
        token = self.service.create_token("user-2")
        with self.assertRaises(InvalidTokenError):
            self.service.verify_token(token, "user-1")

    def test_expired_token_is_rejected(self):
        issued = datetime.now(UTC) - timedelta(seconds=settings.NOTICE_TOKEN_TTL + 60)
        token = self.service.create_token("user-1", now=issued)
        with self.assertRaises(InvalidTokenError):
            self.service.verify_token(token, "user-1")

    def test_token_signed_with_another_secret_is_rejected(self):
        other = NoticeTokenService(secret="another-secret-0123456789abcdefghij")
        token = other.create_token("user-1")
        with self.assertRaises(InvalidTokenError):
            self.service.verify_token(token, "user-1")

    def test_token_for_another_action_is_rejected(self):
        token = jwt.encode(
            {
                "sub": "user-1",
                "act": "delete-everything",
                "exp": datetime.now(UTC) + timedelta(hours=1),
            },
            settings.NOTICE_TOKEN_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            self.service.verify_token(token, "user-1")

    def test_garbage_is_rejected(self):
        with self.assertRaises(InvalidTokenError):
            self.service.verify_token("not-a-token", "user-1")

    def test_decode_returns_claims_without_user(self):
        token = self.service.create_token("user-1")

        claims = self.service.decode_token(token)

        self.assertEqual(claims["sub"], "user-1")
        self.assertEqual(claims["act"], "dismiss-notice")

    def test_decode_rejects_missing_token(self):
        with self.assertRaises(InvalidTokenError):
            self.service.decode_token(None)
