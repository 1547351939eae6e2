"""User-related schemas"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum

class Role(str, Enum):
    """Stored roles; students carry no role field"""
    INSTRUCTOR = "instructor"
    ADMIN = "admin"

class UserCreate(BaseModel):
    """Registration payload; extra profile fields are stored as sent"""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, description="User email, unique key")
    name: Optional[str] = Field(None, description="Display name")
    photo: Optional[str] = Field(None, description="Profile photo URL")

class AdminStatus(BaseModel):
    admin: bool

class InstructorStatus(BaseModel):
    instructor: bool
