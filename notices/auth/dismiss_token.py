"""Authentication from the dismissal token posted by the client trigger."""

import structlog
from rest_framework import authentication

from notices.auth.oauth2 import OAuth2User
from notices.services.token_service import notice_token_service

logger = structlog.get_logger(__name__)

DISMISS_TOKEN_CLIENT_ID = "dismiss-token"


class DismissTokenAuthentication(authentication.BaseAuthentication):
    """Authenticate a dismiss request by its signed ``token`` field.

    The token is minted for one user when the banners are rendered, so a
    valid token identifies the caller without a bearer header. Requests
    without a token are left to the other authentication classes.
    """

    def authenticate(self, request):
        """Resolve the user from the token in the request body.

        Returns:
            Tuple of (user, token) or None when no token was posted

        Raises:
            InvalidTokenError: If a token was posted but does not verify
        """
        token = request.data.get("token") if hasattr(request.data, "get") else None
        if not token:
            return None

        claims = notice_token_service.decode_token(token)
        logger.debug("Authenticated by dismissal token", user_id=claims["sub"])

        user = OAuth2User(
            user_id=str(claims["sub"]),
            client_id=DISMISS_TOKEN_CLIENT_ID,
            scopes=[],
        )
        return (user, token)

    def authenticate_header(self, _request):
        return "Bearer"
