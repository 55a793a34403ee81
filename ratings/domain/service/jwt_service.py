"""JWT token domain service.

Resolves the caller identity from the auth token. This is the only part of
authentication the voting core depends on: "who is calling, if anyone".
"""

from uuid import UUID

import logfire

from ratings.config import AuthSettings
from ratings.domain.value import CallerId
from ratings.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Create JWT token for a caller.

        Args:
            user_id: Caller's durable user ID

        Returns:
            JWT token string
        """
        with self.span("create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with self.span("verify_token"):
            payload = verify_token(token, self.auth_settings)
            logfire.info("JWT token verified", user_id=payload.user_id)
            return payload

    def resolve_caller(self, token: str | None) -> CallerId | None:
        """Resolve the caller identity without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Caller ID if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return CallerId(UUID(payload.user_id))
        except Exception as e:
            # Invalid, expired, or non-UUID subject: treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
