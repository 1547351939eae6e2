"""Course selection (cart) endpoints"""

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional
import logging

from academy.core.config import settings
from academy.core.dependencies import ensure_same_email, get_db, verify_jwt
from academy.schemas.auth import TokenClaims
from academy.schemas.courses import SelectedCourseCreate
from academy.utils.serializers import delete_result, insert_result, serialize_doc, serialize_docs
from academy.utils.validators import parse_object_id

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/selected-courses")
async def list_selected_courses(
    email: Optional[str] = None,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> list:
    if not email:
        return []
    ensure_same_email(claims, email)
    selected = await db[settings.SELECTED_COURSES_COLLECTION].find({"email": email}).to_list(None)
    return serialize_docs(selected)


@router.post("/selected-courses")
async def select_course(
    request: SelectedCourseCreate,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    ensure_same_email(claims, request.email)

    selected = db[settings.SELECTED_COURSES_COLLECTION]
    existing = await selected.find_one({"email": request.email, "courseId": request.courseId})
    if existing:
        logger.info(f"{request.email} already selected course {request.courseId}")
        return {"message": "course already selected"}

    selection_doc = request.model_dump(exclude_none=True)
    selection_doc.pop("_id", None)
    result = await selected.insert_one(selection_doc)
    logger.info(f"{request.email} selected course {request.courseId}")
    return insert_result(result)


@router.delete("/selected-courses/{selection_id}")
async def remove_selected_course(
    selection_id: str,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    result = await db[settings.SELECTED_COURSES_COLLECTION].delete_one(
        {"_id": parse_object_id(selection_id)}
    )
    logger.info(f"{claims.email} removed selection {selection_id} (deleted {result.deleted_count})")
    return delete_result(result)


@router.get("/selected-course/{selection_id}")
async def get_selected_course(
    selection_id: str,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> Optional[dict]:
    selection = await db[settings.SELECTED_COURSES_COLLECTION].find_one(
        {"_id": parse_object_id(selection_id)}
    )
    return serialize_doc(selection)
