"""JWT token utilities for signed-in voters."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field

from reactions.config import AuthSettings

MAX_USER_ID_LENGTH = 150


class TokenPayload(BaseModel):
    """JWT token payload."""

    # Prefixed with "user:" it must fit the 160-character voter_id column
    user_id: str = Field(min_length=1, max_length=MAX_USER_ID_LENGTH)
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Create a JWT token for a signed-in voter.

    Tokens are normally issued by the site's account system; this is used by
    that system's integration and by tests.

    Args:
        user_id: Account identifier
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
