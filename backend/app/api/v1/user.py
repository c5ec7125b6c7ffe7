"""
User API endpoints.

Personal dashboard and profile editing for the signed-in user.
"""

import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.v1.auth import EMAIL_PATTERN, UserResponse, get_current_user
from app.db.base import utcnow
from app.db.session import get_db
from app.models import CareerAssessment, ChatSession, Resume, User

logger = logging.getLogger("app.user")

router = APIRouter()


# ============== Pydantic Schemas ==============


class ProfileUpdateRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None


# ============== API Endpoints ==============


@router.get("/dashboard")
def user_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Profile basics plus how much the user has done on the platform."""
    try:
        stats = {
            "assessments": db.query(CareerAssessment)
            .filter(CareerAssessment.user_id == current_user.id)
            .count(),
            "chatSessions": db.query(ChatSession)
            .filter(ChatSession.user_id == current_user.id)
            .count(),
            "resumes": db.query(Resume).filter(Resume.user_id == current_user.id).count(),
        }
    except SQLAlchemyError:
        logger.exception("Dashboard query failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch dashboard data",
        )

    return {
        "user": {
            "id": current_user.id,
            "username": current_user.username,
            "email": current_user.email,
            "created_at": current_user.created_at,
        },
        "stats": stats,
    }


@router.put("/profile")
def update_profile(
    data: ProfileUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Change username and email.

    Both are required. Rejected if either is already used by another
    account.
    """
    username = (data.username or "").strip()
    email = (data.email or "").strip().lower()

    if not username or not email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and email are required",
        )

    if not re.match(EMAIL_PATTERN, email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid email format",
        )

    try:
        existing_user = (
            db.query(User.id)
            .filter(
                or_(User.email == email, User.username == username),
                User.id != current_user.id,
            )
            .first()
        )
        if existing_user:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username or email already taken",
            )

        current_user.username = username
        current_user.email = email
        current_user.updated_at = utcnow()
        db.commit()
        db.refresh(current_user)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Profile update failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile",
        )

    return {
        "message": "Profile updated successfully",
        "user": UserResponse.model_validate(current_user),
    }
