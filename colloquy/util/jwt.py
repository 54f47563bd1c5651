"""HS256 tokens shared with the identity provider.

The identity provider signs tokens with the shared secret; this module
verifies them and, for scripts and tests, can mint new ones.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from colloquy.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenClaims(BaseModel):
    """Claims carried by a caller's token."""

    user_id: str
    role: str = "user"  # 'admin' or 'user'
    exp: datetime


class JWTError(Exception):
    """Token could not be trusted (bad signature, expired or malformed)."""


def create_token(
    user_id: str,
    role: str,
    settings: AuthSettings,
    expires_in: timedelta | None = None,
) -> str:
    """Sign a token for a user.

    Args:
        user_id: User ID
        role: Caller role
        settings: Authentication settings
        expires_in: Lifetime override (defaults to jwt_expiry_days)

    Returns:
        Encoded token
    """
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)
    claims = TokenClaims(
        user_id=user_id,
        role=role,
        exp=datetime.now(timezone.utc) + lifetime,
    )
    return jwt.encode(
        claims.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenClaims:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired, forged or missing claims
    """
    try:
        decoded = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e

    try:
        return TokenClaims.model_validate(decoded)
    except ValidationError as e:
        raise JWTError(f"Invalid token claims: {e.error_count()} error(s)") from e
