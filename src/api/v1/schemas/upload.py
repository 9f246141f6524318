"""Pydantic schemas for Upload API."""

from api.v1.schemas.common import CamelModel
from api.v1.schemas.profile import ProfileResponse


class PhotoUploadResponse(CamelModel):
    """Schema for POST /api/upload/photo."""

    success: bool = True
    message: str = "Photo uploaded successfully"
    photo_url: str
    data: ProfileResponse


class ResumeUploadResponse(CamelModel):
    """Schema for POST /api/upload/resume."""

    success: bool = True
    message: str = "Resume uploaded successfully"
    resume_url: str
    data: ProfileResponse
