"""Verification of tokens minted by the auth service.

``create_token`` mirrors the auth service's encoding so that tooling and
tests can produce tokens this API accepts.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from vidtube.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    """Claims this API reads from a verified token."""

    user_id: UUID
    username: str = ""
    exp: datetime


class JWTError(Exception):
    """Token missing, malformed, expired or signed with another key."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Encode a token for ``user_id`` that expires after the configured days."""
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    payload = {"user_id": user_id, "username": username, "exp": expiry}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` and validate its claims.

    Raises:
        JWTError: If the signature, expiry or claims are not acceptable
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
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Invalid token claims") from e
