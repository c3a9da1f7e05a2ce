"""Password hashing and signed admin session tokens."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

JWT_ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class TokenError(ValueError):
    """Raised when a session token cannot be trusted."""


def hash_password(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash; malformed hashes never verify."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def create_session_token(
    claims: dict[str, Any],
    *,
    secret: str,
    expires_delta: timedelta,
    now: datetime | None = None,
) -> str:
    """
    Create a signed session token

    Args:
        claims: Payload data (should include 'sub' for the principal identifier)
        secret: Signing key
        expires_delta: Token lifetime

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode.update({"iat": issued_at, "exp": issued_at + expires_delta})
    return jwt.encode(to_encode, secret, algorithm=JWT_ALGORITHM)


def decode_session_token(token: str, *, secret: str) -> dict[str, Any]:
    """Verify signature and expiry of a session token and return its claims."""
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except JWTError as exc:
        raise TokenError(str(exc)) from exc
