"""
Admin API endpoints.

Platform statistics and user management. Every route requires the
'admin' role.
"""

import logging
import math
from datetime import timedelta
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.v1.auth import UserResponse, require_admin
from app.core.config import settings
from app.db.base import utcnow
from app.db.session import get_db
from app.models import USER_ROLES, CareerAssessment, ChatSession, Resume, User

logger = logging.getLogger("app.admin")

router = APIRouter()


# ============== Pydantic Schemas ==============


class RoleUpdateRequest(BaseModel):
    """Schema for changing a user's role. Checked against USER_ROLES in the handler."""

    role: Any = None


def pagination_window(page: int, limit: int) -> tuple[int, int]:
    """Return (offset, limit) for a 1-based page."""
    return (page - 1) * limit, limit


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


# ============== API Endpoints ==============


@router.get("/dashboard")
def admin_dashboard(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Platform-wide counts for the admin overview."""
    try:
        cutoff = utcnow() - timedelta(days=settings.RECENT_USERS_DAYS)

        stats = {
            "totalUsers": db.query(User).count(),
            "totalAssessments": db.query(CareerAssessment).count(),
            "totalChatSessions": db.query(ChatSession).count(),
            "totalResumes": db.query(Resume).count(),
            "recentUsers": db.query(User).filter(User.created_at >= cutoff).count(),
        }
    except SQLAlchemyError:
        logger.exception("Admin dashboard query failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch admin dashboard data",
        )

    return {"stats": stats}


@router.get("/users")
def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """List users newest first, one page at a time."""
    offset, limit = pagination_window(page, limit)

    try:
        total = db.query(User).count()
        users = (
            db.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Listing users failed (page=%s, limit=%s)", page, limit)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch users",
        )

    return {
        "users": [UserResponse.model_validate(user) for user in users],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": page_count(total, limit),
        },
    }


@router.put("/users/{user_id}/role")
def update_user_role(
    user_id: int,
    data: RoleUpdateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Promote or demote a user."""
    if data.role not in USER_ROLES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid role",
        )

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    try:
        user.role = data.role
        user.updated_at = utcnow()
        db.commit()
        db.refresh(user)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Role update failed for user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user role",
        )

    logger.info("Admin %s set role of user %s to %s", admin.id, user_id, data.role)

    return {
        "message": "User role updated successfully",
        "user": UserResponse.model_validate(user),
    }


@router.delete("/users/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Delete a user account. Admins cannot delete themselves."""
    if user_id == admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete your own account",
        )

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    try:
        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Deleting user %s failed", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete user",
        )

    logger.info("Admin %s deleted user %s", admin.id, user_id)

    return {"message": "User deleted successfully"}
