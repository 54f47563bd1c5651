"""Identity resolution for incoming requests."""

from uuid import UUID

import logfire

from colloquy.config import AuthSettings
from colloquy.domain.model.caller import AnonymousCaller, AuthenticatedCaller, Caller
from colloquy.domain.value import Role, UserId
from colloquy.util.jwt import JWTError, verify_token

from .base import Service


class IdentityService(Service):
    """Turns request credentials into a caller identity.

    Tokens are issued by the external identity provider; this service only
    verifies them.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def resolve(self, token: str | None) -> Caller:
        """Resolve a caller from an optional bearer token.

        Missing, invalid or expired tokens resolve to an anonymous caller
        rather than failing the request; anonymous callers may still comment.

        Args:
            token: JWT token string (optional)

        Returns:
            AuthenticatedCaller or AnonymousCaller
        """
        if not token:
            return AnonymousCaller()

        try:
            payload = verify_token(token, self.auth_settings)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            logfire.debug(
                "Token verification failed, treating as anonymous", error=str(e)
            )
            return AnonymousCaller()

        role = Role.ADMIN if payload.role == Role.ADMIN.value else Role.USER
        logfire.debug("Caller resolved", user_id=str(user_id), role=role.value)
        return AuthenticatedCaller(user_id=user_id, role=role)
