"""Session token endpoint"""

from fastapi import APIRouter
import logging

from academy.core.security import create_access_token
from academy.schemas.auth import TokenRequest, TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/jwt", response_model=TokenResponse)
async def issue_token(request: TokenRequest) -> TokenResponse:
    """Sign a short-lived session token for the given email"""
    logger.info(f"Issuing session token for {request.email}")
    return TokenResponse(token=create_access_token(request.email))
