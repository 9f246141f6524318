"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from api.v1.schemas.common import CamelModel


class ProfileResponse(CamelModel):
    """Schema for the profile record."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Alex Morgan",
                "bio": "Passionate developer skilled in Java, HTML, CSS, and Python.",
                "skills": ["Java", "HTML", "CSS", "Python"],
                "githubUrl": "https://github.com/alex-morgan",
                "photoUrl": "/uploads/3f2b9c1e0d7a4b5c8e6f1a2b3c4d5e6f.png",
                "email": "alex.morgan@example.com",
                "phone": "+1 (555) 123-4567",
                "location": "Remote",
                "resumeUrl": None,
                "createdAt": "2026-01-28T10:00:00+00:00",
                "updatedAt": "2026-01-28T10:00:00+00:00",
            }
        },
    )

    id: UUID
    name: str
    bio: str
    skills: list[str]
    github_url: str | None = None
    photo_url: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    resume_url: str | None = None
    created_at: datetime
    updated_at: datetime


class ProfileDetailResponse(CamelModel):
    """Schema for GET /api/profile."""

    success: bool = True
    data: ProfileResponse


class ProfileUpdateResponse(CamelModel):
    """Schema for PUT /api/profile."""

    success: bool = True
    message: str = "Profile updated successfully"
    data: ProfileResponse


class ProfileStatsResponse(CamelModel):
    """Derived profile statistics. ``profileViews`` is mock data."""

    profile_views: int
    last_updated: datetime
    skills_count: int
    has_resume: bool
    has_photo: bool


class ProfileStatsDetailResponse(CamelModel):
    """Schema for GET /api/profile/stats."""

    success: bool = True
    data: ProfileStatsResponse
