from app.models.user import User, USER_ROLES
from app.models.chat import ChatSession, ChatMessage
from app.models.career_assessment import CareerAssessment
from app.models.resume import Resume

__all__ = ["User", "USER_ROLES", "ChatSession", "ChatMessage", "CareerAssessment", "Resume"]
