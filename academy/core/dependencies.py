# ============================================================================
# FILE: academy/core/dependencies.py
# ============================================================================
"""Dependency injection for FastAPI routes"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from typing import Optional
import jwt
import logging

from academy.core import globals as app_globals
from academy.core.config import settings
from academy.core.security import decode_access_token
from academy.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

# auto_error is off so a missing header is reported as 401, not 403
bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncIOMotorDatabase:
    """Get database instance

    This provides the application database to any endpoint that needs it
    """
    if app_globals.client is None:
        logger.error("Database client is not available")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database client unavailable"
        )
    return app_globals.client[settings.DATABASE_NAME]


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized access",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def verify_jwt(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """Validate the bearer token and return its decoded claim"""
    if credentials is None:
        logger.warning("Request without bearer credentials")
        raise _unauthorized()

    try:
        payload = decode_access_token(credentials.credentials)
        return TokenClaims(**payload)
    except jwt.ExpiredSignatureError as e:
        logger.info("Expired session token")
        raise _unauthorized() from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        logger.warning(f"Invalid session token: {e}")
        raise _unauthorized() from e


def require_role(role: str):
    """Factory for a guard that only lets users with `role` through

    Usage in routes:
        claims: TokenClaims = Depends(require_role("admin"))
    """
    async def _require_role(
        claims: TokenClaims = Depends(verify_jwt),
        db: AsyncIOMotorDatabase = Depends(get_db),
    ) -> TokenClaims:
        user = await db[settings.USERS_COLLECTION].find_one({"email": claims.email})
        if not user or user.get("role") != role:
            logger.warning(f"{claims.email} denied: {role} role required")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="forbidden access"
            )
        return claims
    return _require_role


verify_admin = require_role("admin")
verify_instructor = require_role("instructor")


def ensure_same_email(claims: TokenClaims, email: str) -> None:
    """Reject requests that ask about someone else's records"""
    if claims.email != email:
        logger.warning(f"{claims.email} tried to access records of {email}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="forbidden access"
        )
