from app.models import CareerAssessment, ChatSession, Resume, User


def test_dashboard_counts_only_own_records(client, db, user, user_headers, make_user):
    other = make_user("dave")
    db.add_all([
        CareerAssessment(user_id=user.id, answers=[1], recommendations=[]),
        CareerAssessment(user_id=user.id, answers=[2], recommendations=[]),
        CareerAssessment(user_id=other.id, answers=[3], recommendations=[]),
        ChatSession(user_id=user.id, title="a..."),
        Resume(user_id=other.id, filename="x.pdf", file_type="application/pdf", file_size=1),
    ])
    db.commit()

    response = client.get("/api/user/dashboard", headers=user_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == user.id
    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "alice@example.com"
    assert "created_at" in body["user"]
    assert "hashed_password" not in body["user"]
    assert body["stats"] == {"assessments": 2, "chatSessions": 1, "resumes": 0}


def test_update_profile(client, db, user, user_headers):
    response = client.put(
        "/api/user/profile",
        json={"username": "alice2", "email": "alice2@example.com"},
        headers=user_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Profile updated successfully"
    assert body["user"]["username"] == "alice2"
    assert body["user"]["email"] == "alice2@example.com"
    assert "hashed_password" not in body["user"]
    assert "password" not in body["user"]

    db.expire_all()
    assert db.get(User, user.id).username == "alice2"


def test_update_profile_keeping_own_values(client, user, user_headers):
    response = client.put(
        "/api/user/profile",
        json={"username": user.username, "email": user.email},
        headers=user_headers,
    )

    assert response.status_code == 200


def test_update_profile_requires_both_fields(client, user_headers):
    for payload in ({"username": "x"}, {"email": "x@example.com"}, {"username": "", "email": ""}):
        response = client.put("/api/user/profile", json=payload, headers=user_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "Username and email are required"


def test_update_profile_rejects_taken_username(client, db, user, user_headers, make_user):
    make_user("bob", email="bob@example.com")

    response = client.put(
        "/api/user/profile",
        json={"username": "bob", "email": "fresh@example.com"},
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Username or email already taken"
    db.expire_all()
    assert db.get(User, user.id).email == "alice@example.com"


def test_update_profile_rejects_taken_email(client, user_headers, make_user):
    make_user("bob", email="bob@example.com")

    response = client.put(
        "/api/user/profile",
        json={"username": "fresh", "email": "BOB@example.com"},
        headers=user_headers,
    )

    assert response.status_code == 400


def test_update_profile_rejects_malformed_email(client, db, user, user_headers):
    response = client.put(
        "/api/user/profile",
        json={"username": "zz", "email": "not-an-email"},
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid email format"
    db.expire_all()
    assert db.get(User, user.id).email == "alice@example.com"
