from __future__ import annotations

import secrets
from datetime import datetime, timedelta, timezone

from passlib.context import CryptContext

pwd_context: CryptContext = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hash_password(password: str) -> str:
    """Hash a plain-text password.

    Args:
        password: plain-text password.

    Returns:
        str: passlib hash string.
    """
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plain-text password with a stored hash."""
    return pwd_context.verify(password, password_hash)


def new_token() -> str:
    """Random login token (64 hex characters)."""
    return secrets.token_hex(32)


def token_expiry(ttl_minutes: int, now: datetime | None = None) -> datetime:
    """Compute the token expiry time.

    Args:
        ttl_minutes: token lifetime in minutes.
        now: reference time (defaults to current UTC time).

    Returns:
        datetime: expiry time (UTC).
    """
    base = now or utc_now()
    return base + timedelta(minutes=ttl_minutes)
