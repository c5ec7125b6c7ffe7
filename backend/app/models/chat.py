from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class ChatSession(Base):
    """
    Conversation thread with the career assistant.

    Created lazily when a user sends a message without a session id;
    the title is derived from that first message.
    """

    __tablename__ = "chat_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String)
    created_at = Column(DateTime, default=utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="chat_sessions")
    messages = relationship(
        "ChatMessage",
        back_populates="session",
        passive_deletes=True,
    )


class ChatMessage(Base):
    """Single append-only message in a chat session."""

    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True)
    session_id = Column(
        Integer, ForeignKey("chat_sessions.id", ondelete="CASCADE"), index=True, nullable=False
    )
    message = Column(Text, nullable=False)
    sender = Column(String, nullable=False)  # 'user' | 'ai'
    created_at = Column(DateTime, default=utcnow, index=True)

    session = relationship("ChatSession", back_populates="messages")
