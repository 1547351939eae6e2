"""Session token signing and verification"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from academy.core.config import settings


def create_access_token(email: str, expires_hours: Optional[int] = None) -> str:
    """Sign a session token carrying the caller's email"""
    hours = settings.ACCESS_TOKEN_EXPIRE_HOURS if expires_hours is None else expires_hours
    now = datetime.now(timezone.utc)
    payload = {"email": email, "iat": now, "exp": now + timedelta(hours=hours)}
    return jwt.encode(payload, settings.ACCESS_TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Decode and validate a session token

    Raises:
        jwt.InvalidTokenError: bad signature, malformed token or expired
    """
    return jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.JWT_ALGORITHM])
