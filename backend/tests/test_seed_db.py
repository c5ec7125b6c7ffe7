from app.core.security import verify_password
from app.models import CareerAssessment, User
from seed_db import DEMO_ADMIN, DEMO_USER, seed_database


def test_seed_creates_demo_accounts(db):
    assert seed_database(db) is True

    admin = db.query(User).filter(User.email == DEMO_ADMIN["email"]).one()
    jane = db.query(User).filter(User.email == DEMO_USER["email"]).one()
    assert admin.role == "admin"
    assert jane.role == "user"
    assert verify_password(DEMO_USER["password"], jane.hashed_password)
    assert db.query(CareerAssessment).filter(CareerAssessment.user_id == jane.id).count() == 1


def test_seed_is_idempotent(db):
    seed_database(db)

    assert seed_database(db) is False
    assert db.query(User).count() == 2
