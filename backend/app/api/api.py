"""
API Router Aggregator.

Combines all v1 API routers into a single router for the main app.
"""

from fastapi import APIRouter

from app.api.v1 import auth, admin, career, user

api_router = APIRouter()

api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["Admin"],
)

api_router.include_router(
    career.router,
    prefix="/career",
    tags=["Career"],
)

api_router.include_router(
    user.router,
    prefix="/user",
    tags=["User"],
)
