"""
Career API endpoints.

Chat assistant, career quiz, resume upload and assessment history
for the signed-in user.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.db.session import get_db
from app.models import CareerAssessment, ChatMessage, ChatSession, Resume, User
from app.services import (
    build_session_title,
    calculate_career_recommendations,
    generate_career_guidance_response,
    parse_resume_content,
    read_resume_upload,
)

logger = logging.getLogger("app.career")

router = APIRouter()


# ============== Pydantic Schemas ==============


class ChatRequest(BaseModel):
    """Schema for a chat message. ``sessionId`` continues an existing thread."""

    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    session_id: Optional[int] = Field(default=None, alias="sessionId")


class QuizRequest(BaseModel):
    """Quiz submission. ``answers`` must be a list; checked in the handler."""

    answers: Any = None


class ChatSessionSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: Optional[str]
    created_at: datetime


class ChatMessageItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: int
    message: str
    sender: str
    created_at: datetime


class AssessmentItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    answers: list[Any]
    recommendations: list[dict]
    created_at: datetime


class ResumeItem(BaseModel):
    """Stored resume metadata (the file body itself is not kept)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    filename: str
    file_type: Optional[str]
    file_size: Optional[int]
    parsed_content: Optional[dict]
    created_at: datetime


# ============== Helper Functions ==============


def get_owned_session(db: Session, session_id: int, user: User) -> Optional[ChatSession]:
    """Return the chat session only if it belongs to ``user``."""
    return (
        db.query(ChatSession)
        .filter(ChatSession.id == session_id, ChatSession.user_id == user.id)
        .first()
    )


# ============== API Endpoints ==============


@router.post("/chat")
def chat(
    data: ChatRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Send a message to the career assistant.

    Starts a new session when no ``sessionId`` is given. The user message
    and the assistant reply are stored together with the session in one
    transaction.
    """
    if not data.message or not data.message.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message is required",
        )

    if data.session_id is not None:
        session = get_owned_session(db, data.session_id, current_user)
        if not session:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Chat session not found",
            )
    else:
        session = None

    ai_response = generate_career_guidance_response(data.message)

    try:
        if session is None:
            session = ChatSession(
                user_id=current_user.id,
                title=build_session_title(data.message),
            )
            db.add(session)
            db.flush()  # Get session id

        db.add(ChatMessage(session_id=session.id, message=data.message, sender="user"))
        db.flush()
        db.add(ChatMessage(session_id=session.id, message=ai_response, sender="ai"))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Chat failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process chat message",
        )

    return {"sessionId": session.id, "response": ai_response}


@router.get("/chat")
def list_chat_sessions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List the caller's chat sessions, newest first."""
    try:
        sessions = (
            db.query(ChatSession)
            .filter(ChatSession.user_id == current_user.id)
            .order_by(ChatSession.created_at.desc(), ChatSession.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Listing chat sessions failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch chat sessions",
        )

    return {"sessions": [ChatSessionSummary.model_validate(s) for s in sessions]}


@router.get("/chat/{session_id}")
def get_chat_history(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get one session and its messages in the order they were sent."""
    try:
        session = get_owned_session(db, session_id, current_user)
        if not session:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Chat session not found",
            )

        messages = (
            db.query(ChatMessage)
            .filter(ChatMessage.session_id == session.id)
            .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Fetching chat history %s failed", session_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch chat history",
        )

    return {
        "session": ChatSessionSummary.model_validate(session),
        "messages": [ChatMessageItem.model_validate(m) for m in messages],
    }


@router.post("/quiz")
def career_quiz(
    data: QuizRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Score a career quiz and store the result as an assessment."""
    if not isinstance(data.answers, list):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Quiz answers are required",
        )

    recommendations = calculate_career_recommendations(data.answers)

    try:
        assessment = CareerAssessment(
            user_id=current_user.id,
            answers=data.answers,
            recommendations=recommendations,
        )
        db.add(assessment)
        db.commit()
        db.refresh(assessment)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Saving assessment failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save assessment",
        )

    return {"assessmentId": assessment.id, "recommendations": recommendations}


@router.post("/resume")
def upload_resume(
    resume: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Upload a resume (PDF, DOC or DOCX, up to 5MB).

    The file body is parsed into a structured snapshot and only the
    metadata plus that snapshot are stored.
    """
    if resume is None or not resume.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resume file is required",
        )

    content = read_resume_upload(resume)
    parsed_content = parse_resume_content(content, resume.content_type)

    try:
        record = Resume(
            user_id=current_user.id,
            filename=resume.filename,
            file_type=resume.content_type,
            file_size=len(content),
            parsed_content=parsed_content,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Saving resume failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save resume",
        )

    logger.info("Stored resume %s (%s bytes) for user %s", record.id, len(content), current_user.id)

    return {
        "resumeId": record.id,
        "parsedContent": parsed_content,
        "message": "Resume uploaded and parsed successfully",
    }


@router.get("/resumes")
def list_resumes(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List the caller's uploaded resumes, newest first."""
    try:
        resumes = (
            db.query(Resume)
            .filter(Resume.user_id == current_user.id)
            .order_by(Resume.created_at.desc(), Resume.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Listing resumes failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch resumes",
        )

    return {"resumes": [ResumeItem.model_validate(r) for r in resumes]}


@router.get("/assessments")
def list_assessments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List the caller's career assessments, newest first."""
    try:
        assessments = (
            db.query(CareerAssessment)
            .filter(CareerAssessment.user_id == current_user.id)
            .order_by(CareerAssessment.created_at.desc(), CareerAssessment.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Listing assessments failed for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch assessments",
        )

    return {"assessments": [AssessmentItem.model_validate(a) for a in assessments]}
