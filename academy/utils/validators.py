# ============================================================================
# FILE: academy/utils/validators.py
# ============================================================================
"""Input validation utilities"""

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)

def parse_object_id(identifier: str) -> ObjectId:
    """Convert a path identifier to an ObjectId

    Args:
        identifier: 24-char hex string from the URL

    Returns:
        The matching ObjectId

    Raises:
        HTTPException: 400 when the identifier does not have ObjectId shape
    """
    try:
        return ObjectId(identifier)
    except (InvalidId, TypeError) as e:
        logger.warning(f"Invalid identifier: {identifier!r}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid identifier"
        ) from e
