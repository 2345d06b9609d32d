"""Anti-forgery tokens for notice dismissal requests."""

from datetime import UTC, datetime, timedelta

from django.conf import settings

import jwt
import structlog

from notices.constants import NOTICE_DISMISS_ACTION
from notices.exceptions import InvalidTokenError

logger = structlog.get_logger(__name__)

TOKEN_ALGORITHM = "HS256"


class NoticeTokenService:
    """Issues and verifies short-lived, user-bound dismissal tokens.

    Tokens are HS256 JWTs carrying the user id (``sub``) and the action they
    authorize (``act``). They are embedded in the client script at render
    time and echoed back verbatim with each dismiss request.
    """

    def __init__(self, secret: str | None = None, ttl_seconds: int | None = None):
        self._secret = secret
        self._ttl_seconds = ttl_seconds

    @property
    def secret(self) -> str:
        return self._secret or settings.NOTICE_TOKEN_SECRET

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds or settings.NOTICE_TOKEN_TTL

    def create_token(self, user_id: str, now: datetime | None = None) -> str:
        """Issue a dismissal token for a user.

        Args:
            user_id: Identity the token is bound to
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded token string
        """
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "act": NOTICE_DISMISS_ACTION,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.ttl_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=TOKEN_ALGORITHM)

    def decode_token(self, token: str | None) -> dict:
        """Verify a token's signature, expiry and action and return its claims.

        Raises:
            InvalidTokenError: If the token is missing, malformed, expired,
                signed with another secret or issued for another action.
        """
        if not token:
            raise InvalidTokenError("Security token missing")

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["sub", "act", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("Dismissal token has expired")
            raise InvalidTokenError("Security token expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Malformed dismissal token", error=str(e))
            raise InvalidTokenError("Security token invalid") from e

        if payload.get("act") != NOTICE_DISMISS_ACTION:
            raise InvalidTokenError("Security token issued for another action")
        return payload

    def verify_token(self, token: str | None, user_id: str | None) -> None:
        """Check a submitted token against the acting user.

        Args:
            token: Token echoed by the client
            user_id: Identity of the authenticated caller

        Raises:
            InvalidTokenError: If ``decode_token`` rejects the token or it is
                bound to another user.
        """
        if not user_id:
            raise InvalidTokenError("Security token missing")

        payload = self.decode_token(token)
        if payload.get("sub") != str(user_id):
            logger.warning("Dismissal token bound to another user", user_id=user_id)
            raise InvalidTokenError("Security token issued to another user")


notice_token_service = NoticeTokenService()
