"""
Resume upload validation.

Accepted: PDF, legacy Word (.doc) and Word XML (.docx), up to the configured size.
"""

from fastapi import HTTPException, UploadFile, status

from app.core.config import settings

ALLOWED_RESUME_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

CHUNK_SIZE = 64 * 1024


def max_resume_bytes() -> int:
    return settings.MAX_RESUME_SIZE_MB * 1024 * 1024


def read_resume_upload(file: UploadFile) -> bytes:
    """
    Validate an uploaded resume and return its bytes.

    Raises:
        HTTPException: 400 for a disallowed type, 413 when over the size cap
    """
    if file.content_type not in ALLOWED_RESUME_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF and Word documents are allowed",
        )

    limit = max_resume_bytes()
    content = bytearray()
    while True:
        chunk = file.file.read(CHUNK_SIZE)
        if not chunk:
            break
        content.extend(chunk)
        if len(content) > limit:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum size is {settings.MAX_RESUME_SIZE_MB}MB",
            )

    return bytes(content)
