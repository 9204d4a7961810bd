"""Signed admin session cookie helpers."""

import hmac
from datetime import datetime, timedelta, timezone

import jwt

from config import AdminConfig

ALGORITHM = "HS256"


def credentials_match(username: str, password: str, config: AdminConfig) -> bool:
    """Compares submitted credentials against the configured admin account."""
    if not config.password:
        return False
    username_ok = hmac.compare_digest(username.encode(), config.username.encode())
    password_ok = hmac.compare_digest(password.encode(), config.password.encode())
    return username_ok and password_ok


def create_session_token(
    username: str, config: AdminConfig, now: datetime | None = None
) -> tuple[str, datetime]:
    """
    Issues a signed session token for the admin.

    Returns:
        Tuple of (token, expires_at).
    """
    now = now or datetime.now(tz=timezone.utc)
    expires_at = now + timedelta(seconds=config.session_ttl_seconds)
    payload = {
        "sub": username,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=ALGORITHM), expires_at


def decode_session_token(token: str, config: AdminConfig) -> dict:
    """
    Verifies a session token and returns its claims.

    Raises:
        jwt.PyJWTError: If the token is malformed, tampered with or expired.
    """
    return jwt.decode(token, config.jwt_secret, algorithms=[ALGORITHM])
