"""Session token helpers.

Tokens carry the user's ID in the standard ``sub`` claim. The API has no
users table, so the token is the only place the user's handle lives.
"""

from datetime import UTC, datetime, timedelta

import jwt
from pydantic import BaseModel

from stackit.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str
    handle: str = ""
    iat: datetime
    exp: datetime

    @property
    def user_id(self) -> str:
        return self.sub


class JWTError(Exception):
    """Session token could not be verified."""


def create_token(user_id: str, handle: str, settings: AuthSettings) -> str:
    """Issue a session token for a user.

    Args:
        user_id: User ID, stored as the subject
        handle: Display handle
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(UTC)
    claims = {
        "sub": user_id,
        "handle": handle,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a session token, checking signature, expiry and required claims.

    Raises:
        JWTError: If the token is malformed, expired or missing a claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing the {e.claim} claim") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    return TokenPayload(**claims)
