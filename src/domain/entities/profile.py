"""Profile domain entities."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Annotated, Any
from uuid import UUID, uuid4

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

PHONE_PATTERN = re.compile(r"^[+]?[1-9][\d\s\-\(\)]{7,15}$", re.ASCII)

_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Profile:
    """Domain entity for the site owner's profile."""

    name: str
    bio: str
    skills: list[str] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    github_url: str | None = None
    photo_url: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    resume_url: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def touch(self) -> None:
        """Refresh updated_at; never moves backwards."""
        self.updated_at = max(utcnow(), self.updated_at)


@dataclass(frozen=True, slots=True)
class ProfileStats:
    """Read-only summary of the profile for dashboards."""

    profile_views: int
    last_updated: datetime
    skills_count: int
    has_resume: bool
    has_photo: bool


class ProfileUpdate(BaseModel):
    """Validated partial update.

    ``name`` and ``bio`` are always required; every other field is applied
    only when present. Server-owned fields (id, photo/resume urls,
    timestamps) and unknown keys are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    name: str = Field(..., min_length=2, max_length=100)
    bio: str = Field(..., min_length=10, max_length=1000)
    skills: list[Annotated[str, Field(min_length=1, max_length=50)]] | None = Field(
        None, min_length=1, max_length=20
    )
    github_url: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = Field(None, min_length=1, max_length=100)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        # Defaults are not validated, so this only fires for explicit nulls.
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator("github_url")
    @classmethod
    def validate_github_url(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                _url_adapter.validate_python(v)
            except PydanticValidationError:
                raise ValueError("must be a valid uri") from None
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                _email_adapter.validate_python(v)
            except PydanticValidationError:
                raise ValueError("must be a valid email") from None
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str | None) -> str | None:
        if v is not None and not PHONE_PATTERN.match(v):
            raise ValueError("must be a valid phone number")
        return v

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


def default_profile() -> Profile:
    """Seed record installed at startup."""
    return Profile(
        name="Alex Morgan",
        bio=(
            "Passionate developer skilled in Java, HTML, CSS, and Python. "
            "I love creating innovative solutions and learning new technologies."
        ),
        skills=["Java", "HTML", "CSS", "Python"],
        github_url="https://github.com/alex-morgan",
        email="alex.morgan@example.com",
        phone="+1 (555) 123-4567",
        location="Remote",
    )
