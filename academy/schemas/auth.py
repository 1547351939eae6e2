
# academy/schemas/auth.py

"""Authentication-related schemas"""

from pydantic import BaseModel, Field
from typing import Optional

class TokenRequest(BaseModel):
    """Session token request"""
    email: str = Field(..., min_length=1, description="User email")

class TokenResponse(BaseModel):
    """Session token response"""
    token: str = Field(..., description="JWT access token")

class TokenClaims(BaseModel):
    """Decoded JWT payload"""
    email: str = Field(..., min_length=1, description="Claimed email")
    exp: Optional[int] = Field(None, description="Expiration time")
    iat: Optional[int] = Field(None, description="Issued at time")
