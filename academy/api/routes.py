"""Main API router - paths match the frontend client"""

from fastapi import APIRouter

from academy.api.endpoints import auth, courses, payments, selections, users

router = APIRouter()


router.include_router(auth.router, tags=["Auth"])
router.include_router(users.router, tags=["Users"])
router.include_router(courses.router, tags=["Courses"])
router.include_router(selections.router, tags=["Selected Courses"])
router.include_router(payments.router, tags=["Payments"])
