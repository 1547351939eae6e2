# ============================================================================
# FILE: academy/api/endpoints/users.py
# ============================================================================
"""User registration and role management endpoints"""

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional
import logging

from academy.core.config import settings
from academy.core.dependencies import ensure_same_email, get_db, verify_admin, verify_jwt
from academy.schemas.auth import TokenClaims
from academy.schemas.users import AdminStatus, InstructorStatus, Role, UserCreate
from academy.utils.serializers import insert_result, serialize_docs, update_result
from academy.utils.validators import parse_object_id

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/users")
async def list_users(
    claims: TokenClaims = Depends(verify_admin),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> list:
    """Every registered user (admin dashboard)"""
    users = await db[settings.USERS_COLLECTION].find({}).to_list(None)
    return serialize_docs(users)


@router.get("/all-users")
async def list_all_users(
    role: Optional[str] = None,
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> list:
    """Public user listing, e.g. `?role=instructor` for the instructors page"""
    query = {"role": role} if role else {}
    users = await db[settings.USERS_COLLECTION].find(query).to_list(None)
    return serialize_docs(users)


@router.post("/users")
async def register_user(
    request: UserCreate,
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    """
    Register a user on first sign-in

    Registering an email that already exists is a no-op.
    Roles are never taken from the request body.
    """
    users = db[settings.USERS_COLLECTION]
    existing = await users.find_one({"email": request.email})
    if existing:
        logger.info(f"User already exists: {request.email}")
        return {"message": "user already exists"}

    user_doc = request.model_dump(exclude_none=True)
    user_doc.pop("role", None)
    user_doc.pop("_id", None)

    result = await users.insert_one(user_doc)
    logger.info(f"Registered user {request.email}")
    return insert_result(result)


@router.get("/users/admin/{email}", response_model=AdminStatus)
async def check_admin(
    email: str,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> AdminStatus:
    ensure_same_email(claims, email)
    user = await db[settings.USERS_COLLECTION].find_one({"email": email})
    return AdminStatus(admin=bool(user) and user.get("role") == Role.ADMIN.value)


@router.get("/users/instructor/{email}", response_model=InstructorStatus)
async def check_instructor(
    email: str,
    claims: TokenClaims = Depends(verify_jwt),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> InstructorStatus:
    ensure_same_email(claims, email)
    user = await db[settings.USERS_COLLECTION].find_one({"email": email})
    return InstructorStatus(instructor=bool(user) and user.get("role") == Role.INSTRUCTOR.value)


async def _set_role(db: AsyncIOMotorDatabase, user_id: str, role: Role) -> dict:
    result = await db[settings.USERS_COLLECTION].update_one(
        {"_id": parse_object_id(user_id)},
        {"$set": {"role": role.value}}
    )
    logger.info(f"Set role {role.value} on user {user_id} (matched {result.matched_count})")
    return update_result(result)


@router.patch("/users/admin/{user_id}")
async def make_admin(
    user_id: str,
    claims: TokenClaims = Depends(verify_admin),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    return await _set_role(db, user_id, Role.ADMIN)


@router.patch("/users/instructor/{user_id}")
async def make_instructor(
    user_id: str,
    claims: TokenClaims = Depends(verify_admin),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    return await _set_role(db, user_id, Role.INSTRUCTOR)
