"""
Password hashing (passlib/bcrypt) and JWT bearer tokens (PyJWT).

Tokens carry the user id as the ``sub`` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Union

import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(
    subject: Union[int, str],
    expires_delta: Optional[timedelta] = None,
    extra_claims: Optional[dict] = None,
) -> str:
    """
    Create a signed access token for a user.

    Args:
        subject: The user id; stored as a string ``sub`` claim
        expires_delta: Optional custom lifetime, defaults to the configured one
        extra_claims: Additional claims merged into the payload

    Returns:
        The encoded JWT string
    """
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    payload = dict(extra_claims or {})
    payload.update({
        "sub": str(subject),
        "exp": datetime.now(timezone.utc) + lifetime,
    })

    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Return the token payload, or None if the signature or expiry is invalid."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except InvalidTokenError:
        return None


def get_token_user_id(token: str) -> Optional[int]:
    """Extract the user id from a token, or None if it is missing or malformed."""
    payload = decode_access_token(token)
    if payload is None:
        return None

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        return None
