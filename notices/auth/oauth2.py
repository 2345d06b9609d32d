"""OAuth2 authentication backend for Django REST Framework.

Supports two validation modes:
1. Token Introspection: validates tokens by calling the auth service
2. Local JWT Validation: validates JWT signatures locally using a shared secret
"""

import hashlib
from typing import Any, cast

from django.conf import settings
from django.core.cache import cache

import jwt
import requests
import structlog
from rest_framework import authentication, exceptions

logger = structlog.get_logger(__name__)


class OAuth2User:
    """Identity of the caller, built from bearer token claims.

    This is not a Django User model. ``user_id`` is the key under which
    per-user notice dismissals are stored.
    """

    def __init__(self, user_id: str, client_id: str, scopes: list[str]):
        self.id = user_id
        self.user_id = user_id
        self.client_id = client_id
        self.scopes = scopes
        self.is_authenticated = True

    def has_scope(self, scope: str) -> bool:
        """Check if the user was granted a specific scope."""
        return scope in self.scopes

    def __str__(self):
        return f"OAuth2User(user_id={self.user_id}, client_id={self.client_id})"


class OAuth2Authentication(authentication.BaseAuthentication):
    """OAuth2 Bearer token authentication.

    Extracts and validates Bearer tokens from the Authorization header.
    """

    def authenticate(self, request):
        """Authenticate the request using an OAuth2 Bearer token.

        Args:
            request: Django request object

        Returns:
            Tuple of (user, token) or None if authentication was not attempted

        Raises:
            AuthenticationFailed: If a token was supplied but is invalid
        """
        if not settings.OAUTH2_SERVICE_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]

        if settings.OAUTH2_INTROSPECTION_ENABLED:
            token_data = self._validate_via_introspection(token)
        else:
            token_data = self._validate_via_jwt(token)

        user = OAuth2User(
            user_id=str(token_data.get("sub") or token_data.get("client_id", "unknown")),
            client_id=token_data.get("client_id", "unknown"),
            scopes=token_data.get("scopes", []),
        )

        return (user, token)

    def _validate_via_introspection(self, token: str) -> dict[str, Any]:
        """Validate a token via the auth service introspection endpoint.

        Active results are cached for OAUTH2_TOKEN_CACHE_TTL seconds, keyed
        on a digest of the whole token.
        """
        token_digest = hashlib.sha256(token.encode()).hexdigest()
        cache_key = f"{settings.OAUTH2_TOKEN_CACHE_PREFIX}{token_digest}"
        cached_data = cache.get(cache_key)
        if cached_data:
            logger.debug("Using cached token introspection result")
            return cast("dict[str, Any]", cached_data)

        try:
            response = requests.post(
                settings.OAUTH2_INTROSPECT_URL,
                data={
                    "token": token,
                    "token_type_hint": "access_token",
                },
                auth=(settings.OAUTH2_CLIENT_ID, settings.OAUTH2_CLIENT_SECRET),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=5,
            )
        except requests.RequestException as e:
            logger.error("Token introspection request failed", error=str(e))
            raise exceptions.AuthenticationFailed(
                "Token validation service unavailable"
            ) from e

        if response.status_code != 200:
            logger.warning(
                "Token introspection failed",
                status_code=response.status_code,
            )
            raise exceptions.AuthenticationFailed("Token introspection failed")

        data = response.json()
        if not data.get("active", False):
            logger.info("Token is not active")
            raise exceptions.AuthenticationFailed("Token is not active")

        cache.set(cache_key, data, timeout=settings.OAUTH2_TOKEN_CACHE_TTL)
        return cast("dict[str, Any]", data)

    def _validate_via_jwt(self, token: str) -> dict[str, Any]:
        """Validate a token locally by verifying its JWT signature."""
        if not settings.JWT_SECRET:
            logger.error("JWT_SECRET not configured but local validation is enabled")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=["HS256", "HS384", "HS512"],
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("JWT token has expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid JWT token", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = payload.get("type")
        if token_type != "access_token":
            logger.warning("Invalid token type", token_type=token_type)
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")

        return {
            "active": True,
            "sub": payload.get("sub"),
            "client_id": payload.get("client_id"),
            "scopes": payload.get("scopes", []),
        }

    def authenticate_header(self, _request):
        """Return the WWW-Authenticate header value for 401 responses."""
        return "Bearer"
