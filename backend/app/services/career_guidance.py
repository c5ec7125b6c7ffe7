"""
Career guidance stubs.

Placeholder logic for the chat assistant, the quiz recommender and the
resume parser. Each is a plain function so a real model or parser can be
swapped in without touching the routes.
"""

import random
from typing import Any, Optional

CANNED_RESPONSES = [
    "That's a great question about your career! Based on your interests, I'd recommend "
    "exploring roles in technology, healthcare, or creative industries.",
    "Career development is a journey. Consider your strengths, interests, and values when "
    "making decisions.",
    "Have you thought about what skills you'd like to develop? This can help guide your "
    "career path.",
    "Networking and continuous learning are key to career success. What areas interest you most?",
    "Consider taking our career assessment quiz to get personalized recommendations!",
]

CAREER_CATALOG = [
    {"title": "Software Developer", "match": 85, "description": "Build applications and systems"},
    {"title": "Data Scientist", "match": 78, "description": "Analyze data to drive decisions"},
    {"title": "UX Designer", "match": 72, "description": "Design user-friendly interfaces"},
    {"title": "Project Manager", "match": 68, "description": "Lead teams and manage projects"},
    {"title": "Marketing Specialist", "match": 65, "description": "Promote products and services"},
]

TOP_RECOMMENDATIONS = 3

PLACEHOLDER_RESUME = {
    "skills": ["JavaScript", "React", "Node.js", "Python"],
    "experience": [
        "Software Developer at Tech Corp (2020-2023)",
        "Intern at StartupXYZ (2019-2020)",
    ],
    "education": ["Bachelor's in Computer Science - University ABC (2019)"],
    "summary": "Experienced software developer with expertise in web technologies",
}

CHAT_TITLE_LENGTH = 50


def build_session_title(message: str) -> str:
    """Title for a new chat session, taken from its first message."""
    return message[:CHAT_TITLE_LENGTH] + "..."


def generate_career_guidance_response(message: str, rng: Optional[random.Random] = None) -> str:
    """Pick a canned assistant reply. The message content is not inspected."""
    chooser = rng or random
    return chooser.choice(CANNED_RESPONSES)


def calculate_career_recommendations(answers: list[Any]) -> list[dict]:
    """
    Return the top career matches for a quiz submission.

    The answers are not scored yet; every submission gets the same
    leading entries of the catalog.
    """
    return [dict(career) for career in CAREER_CATALOG[:TOP_RECOMMENDATIONS]]


def parse_resume_content(content: bytes, mimetype: str) -> dict:
    """Return a structured resume snapshot. Placeholder, ignores the file body."""
    return {
        key: list(value) if isinstance(value, list) else value
        for key, value in PLACEHOLDER_RESUME.items()
    }
