from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow

USER_ROLES = ("user", "admin")


class User(Base):
    """Account for the career portal. Role gates the admin routes."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="user")  # 'user' | 'admin'

    created_at = Column(DateTime, default=utcnow, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
    last_login = Column(DateTime, nullable=True)

    # Relationships
    chat_sessions = relationship("ChatSession", back_populates="user", passive_deletes=True)
    assessments = relationship("CareerAssessment", back_populates="user", passive_deletes=True)
    resumes = relationship("Resume", back_populates="user", passive_deletes=True)
