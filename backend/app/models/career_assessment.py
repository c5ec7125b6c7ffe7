from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class CareerAssessment(Base):
    """
    Career quiz submission with the recommendations computed from it.

    answers: the raw quiz answers as submitted, in order
    recommendations: [{ "title": str, "match": int, "description": str }, ...]
    """

    __tablename__ = "career_assessments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    answers = Column(JSON, default=list)
    recommendations = Column(JSON, default=list)

    created_at = Column(DateTime, default=utcnow, index=True)

    user = relationship("User", back_populates="assessments")
