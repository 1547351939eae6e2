# ============================================================================
# FILE: academy/api/endpoints/payments.py
# ============================================================================
"""Payment and enrollment endpoints"""

from fastapi import APIRouter, HTTPException, status, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from datetime import datetime, timezone
from typing import Optional
import logging

from academy.core import payment_gateway
from academy.core.config import settings
from academy.core.dependencies import ensure_same_email, get_db, verify_jwt
from academy.schemas.auth import TokenClaims
from academy.schemas.payments import PaymentCreate, PaymentIntentRequest, PaymentIntentResponse
from academy.utils.serializers import delete_result, insert_result, serialize_docs
from academy.utils.validators import parse_object_id

logger = logging.getLogger(__name__)
router = APIRouter()


# ==================== PAYMENT INTENT ====================

@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest,
    claims: TokenClaims = Depends(verify_jwt)
) -> PaymentIntentResponse:
    """
    Ask Stripe for a card payment intent

    The frontend confirms the card payment with the returned client secret,
    then calls POST /payments and PATCH /courses/update-seat/{id}.
    """
    try:
        client_secret = await payment_gateway.create_payment_intent(request.price)
    except payment_gateway.PaymentGatewayError as e:
        logger.error(f"Payment intent failed for {claims.email}: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="payment gateway error"
        ) from e

    logger.info(f"Payment intent created for {claims.email}")
    return PaymentIntentResponse(clientSecret=client_secret)


# ==================== RECORD PAYMENT ====================

@router.post("/payments")
async def record_payment(
    request: PaymentCreate,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    """
    Store a completed payment as an enrollment

    When the payment names the selection it came from, that selection is
    removed in a separate write.
    """
    ensure_same_email(claims, request.email)
    selection_oid = parse_object_id(request.selectedCourseId) if request.selectedCourseId else None

    payment_doc = request.model_dump(exclude_none=True)
    payment_doc.pop("_id", None)
    payment_doc.setdefault("date", datetime.now(timezone.utc))

    result = await db[settings.ENROLLED_COURSES_COLLECTION].insert_one(payment_doc)
    logger.info(f"✓ Enrollment recorded: {request.email} -> {request.courseId} ({request.transactionId})")

    removed = None
    if selection_oid is not None:
        removed = delete_result(
            await db[settings.SELECTED_COURSES_COLLECTION].delete_one({"_id": selection_oid})
        )

    return {"insertResult": insert_result(result), "deleteResult": removed}


# ==================== ENROLLMENTS ====================

@router.get("/enrolled-courses")
async def list_enrolled_courses(
    email: Optional[str] = None,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> list:
    if not email:
        return []
    ensure_same_email(claims, email)
    enrolled = await db[settings.ENROLLED_COURSES_COLLECTION].find({"email": email}).to_list(None)
    return serialize_docs(enrolled)
