# academy/schemas/payments.py
"""Payment-related schemas"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


# ==================== REQUEST SCHEMAS ====================

class PaymentIntentRequest(BaseModel):
    """Create a payment intent for a course price"""
    price: float = Field(..., gt=0, description="Price in major currency units")

class PaymentCreate(BaseModel):
    """Completed payment; stored as an enrollment"""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, description="Student email")
    courseId: str = Field(..., description="Purchased course identifier")
    transactionId: str = Field(..., description="Provider transaction id")
    price: float = Field(..., ge=0, description="Amount paid")
    date: Optional[datetime] = Field(None, description="Payment time")
    selectedCourseId: Optional[str] = Field(None, description="Selection to clear after enrollment")


# ==================== RESPONSE SCHEMAS ====================

class PaymentIntentResponse(BaseModel):
    """Client secret of the created intent"""
    clientSecret: str = Field(..., description="Stripe client secret")
