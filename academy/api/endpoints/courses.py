# ============================================================================
# FILE: academy/api/endpoints/courses.py
# ============================================================================
"""Course listing, submission and moderation endpoints"""

from fastapi import APIRouter, HTTPException, Query, status, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional
import logging

from academy.core.config import settings
from academy.core.dependencies import (
    ensure_same_email, get_db, verify_admin, verify_instructor, verify_jwt
)
from academy.schemas.auth import TokenClaims
from academy.schemas.courses import CourseCreate, CourseFeedback, CourseStatus
from academy.utils.serializers import insert_result, serialize_doc, serialize_docs, update_result
from academy.utils.validators import parse_object_id

logger = logging.getLogger(__name__)
router = APIRouter()


# ============================================================================
# Listing
# ============================================================================

@router.get("/courses")
async def list_courses(
    course_status: CourseStatus = Query(CourseStatus.APPROVED, alias="status"),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> list:
    """Public course catalogue; only approved courses unless `?status=` says otherwise"""
    courses = await db[settings.COURSES_COLLECTION].find({"status": course_status.value}).to_list(None)
    return serialize_docs(courses)


@router.get("/all-courses")
async def list_all_courses(
    course_status: Optional[CourseStatus] = Query(None, alias="status"),
    claims: TokenClaims = Depends(verify_admin),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> list:
    """Every course regardless of moderation state (admin)"""
    query = {"status": course_status.value} if course_status else {}
    courses = await db[settings.COURSES_COLLECTION].find(query).to_list(None)
    return serialize_docs(courses)


@router.get("/courses/{course_id}")
async def get_course(
    course_id: str,
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> Optional[dict]:
    course = await db[settings.COURSES_COLLECTION].find_one({"_id": parse_object_id(course_id)})
    return serialize_doc(course)


@router.get("/instructor-courses")
async def list_instructor_courses(
    email: str,
    claims: TokenClaims = Depends(verify_instructor),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> list:
    """Courses submitted by the calling instructor"""
    ensure_same_email(claims, email)
    courses = await db[settings.COURSES_COLLECTION].find({"instructorEmail": email}).to_list(None)
    return serialize_docs(courses)


# ============================================================================
# Submission
# ============================================================================

@router.post("/courses")
async def create_course(
    request: CourseCreate,
    claims: TokenClaims = Depends(verify_instructor),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    """
    Submit a course for review

    New courses always start pending with nobody enrolled,
    whatever the body says.
    """
    ensure_same_email(claims, request.instructorEmail)

    course_doc = request.model_dump(exclude_none=True)
    course_doc.pop("_id", None)
    course_doc.update({
        "status": CourseStatus.PENDING.value,
        "enrolled": 0,
    })

    result = await db[settings.COURSES_COLLECTION].insert_one(course_doc)
    logger.info(f"Course submitted by {claims.email}: {request.name}")
    return insert_result(result)


# ============================================================================
# Moderation
# ============================================================================

async def _set_fields(db: AsyncIOMotorDatabase, course_id: str, fields: dict) -> dict:
    result = await db[settings.COURSES_COLLECTION].update_one(
        {"_id": parse_object_id(course_id)},
        {"$set": fields}
    )
    logger.info(f"Course {course_id} updated with {fields} (matched {result.matched_count})")
    return update_result(result)


@router.patch("/courses/approved/{course_id}")
async def approve_course(
    course_id: str,
    claims: TokenClaims = Depends(verify_admin),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    return await _set_fields(db, course_id, {"status": CourseStatus.APPROVED.value})


@router.patch("/courses/denied/{course_id}")
async def deny_course(
    course_id: str,
    claims: TokenClaims = Depends(verify_admin),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    return await _set_fields(db, course_id, {"status": CourseStatus.DENIED.value})


@router.patch("/courses/feedback/{course_id}")
async def send_feedback(
    course_id: str,
    request: CourseFeedback,
    claims: TokenClaims = Depends(verify_admin),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    return await _set_fields(db, course_id, {"feedback": request.feedback})


# ============================================================================
# Enrollment counters
# ============================================================================

@router.patch("/courses/update-seat/{course_id}")
async def update_seat(
    course_id: str,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    """
    Take one seat after a successful payment

    Seats and enrolled count move together in a single document update,
    and only while a seat is left.
    """
    oid = parse_object_id(course_id)
    courses = db[settings.COURSES_COLLECTION]
    result = await courses.update_one(
        {"_id": oid, "availableSeats": {"$gt": 0}},
        {"$inc": {"availableSeats": -1, "enrolled": 1}}
    )

    if result.matched_count == 0 and await courses.find_one({"_id": oid}):
        logger.warning(f"No seats left on course {course_id}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="no seats available"
        )

    logger.info(f"{claims.email} took a seat on course {course_id}")
    return update_result(result)
