"""
CareerPath Database Seeder

Creates a demo admin and a demo user with one finished career quiz.
Safe to run more than once.

Run from backend/: python seed_db.py
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.logging import configure_logging
from app.core.security import get_password_hash
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import CareerAssessment, User
from app.services import calculate_career_recommendations

logger = logging.getLogger("app.seed")

DEMO_ADMIN = {"username": "admin", "email": "admin@careerpath.dev", "password": "admin123"}
DEMO_USER = {"username": "jane", "email": "jane@careerpath.dev", "password": "jane1234"}


def seed_database(db: Optional[Session] = None) -> bool:
    """
    Seed the database with demo accounts.

    Returns:
        True if data was inserted, False if it was already present
    """
    owns_session = db is None
    if owns_session:
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()

    try:
        existing_admin = db.query(User).filter(User.email == DEMO_ADMIN["email"]).first()
        if existing_admin:
            logger.info("Database already seeded. Skipping...")
            return False

        admin = User(
            username=DEMO_ADMIN["username"],
            email=DEMO_ADMIN["email"],
            hashed_password=get_password_hash(DEMO_ADMIN["password"]),
            role="admin",
        )
        jane = User(
            username=DEMO_USER["username"],
            email=DEMO_USER["email"],
            hashed_password=get_password_hash(DEMO_USER["password"]),
            role="user",
        )
        db.add_all([admin, jane])
        db.flush()  # Get IDs

        answers = ["enjoy problem solving", "prefer remote work", "like data"]
        db.add(
            CareerAssessment(
                user_id=jane.id,
                answers=answers,
                recommendations=calculate_career_recommendations(answers),
            )
        )
        db.commit()

        logger.info("Seeded admin %s and user %s", admin.email, jane.email)
        return True
    except Exception:
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    configure_logging()
    seed_database()
