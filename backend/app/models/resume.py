from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class Resume(Base):
    """Uploaded resume metadata plus the parsed-content snapshot."""

    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    filename = Column(String, nullable=False)
    file_type = Column(String)  # declared MIME type
    file_size = Column(Integer)  # bytes

    # Example: {"skills": [...], "experience": [...], "education": [...], "summary": "..."}
    parsed_content = Column(JSON, default=dict)

    created_at = Column(DateTime, default=utcnow, index=True)

    user = relationship("User", back_populates="resumes")
