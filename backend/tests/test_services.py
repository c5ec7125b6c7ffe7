import random

from app.services import (
    CANNED_RESPONSES,
    CAREER_CATALOG,
    build_session_title,
    calculate_career_recommendations,
    generate_career_guidance_response,
    parse_resume_content,
)


def test_session_title_is_truncated_with_ellipsis():
    assert build_session_title("short") == "short..."
    assert build_session_title("x" * 80) == "x" * 50 + "..."


def test_guidance_response_is_canned():
    rng = random.Random(7)
    replies = {generate_career_guidance_response("anything", rng=rng) for _ in range(50)}

    assert replies <= set(CANNED_RESPONSES)
    assert len(replies) > 1


def test_recommendations_are_catalog_prefix():
    recommendations = calculate_career_recommendations([1, 2, 3])

    assert recommendations == CAREER_CATALOG[:3]
    assert calculate_career_recommendations([]) == recommendations


def test_recommendations_are_copies():
    calculate_career_recommendations([])[0]["match"] = 0

    assert CAREER_CATALOG[0]["match"] == 85


def test_parse_resume_content_shape():
    parsed = parse_resume_content(b"%PDF", "application/pdf")

    assert parsed["skills"] == ["JavaScript", "React", "Node.js", "Python"]
    assert parsed["summary"]
    assert len(parsed["experience"]) == 2
    assert parse_resume_content(b"", "application/msword") == parsed
