from app.services.career_guidance import (
    build_session_title,
    generate_career_guidance_response,
    calculate_career_recommendations,
    parse_resume_content,
    CANNED_RESPONSES,
    CAREER_CATALOG,
)
from app.services.uploads import read_resume_upload, ALLOWED_RESUME_TYPES

__all__ = [
    "build_session_title",
    "generate_career_guidance_response",
    "calculate_career_recommendations",
    "parse_resume_content",
    "CANNED_RESPONSES",
    "CAREER_CATALOG",
    "read_resume_upload",
    "ALLOWED_RESUME_TYPES",
]
