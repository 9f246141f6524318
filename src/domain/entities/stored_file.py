"""Stored file value object."""

from dataclasses import dataclass

UPLOADS_URL_PREFIX = "/uploads"


@dataclass(frozen=True, slots=True)
class StoredFile:
    """A file accepted by the upload handler and written to storage."""

    name: str
    original_filename: str
    size: int
    content_type: str

    @property
    def url(self) -> str:
        return f"{UPLOADS_URL_PREFIX}/{self.name}"
