"""Upload API routes."""

from fastapi import APIRouter, Depends, File, Request, UploadFile

from api.v1.dependencies import get_profile_service, get_upload_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.profile import ProfileResponse
from api.v1.schemas.upload import PhotoUploadResponse, ResumeUploadResponse
from core.rate_limit import limiter
from domain.entities.stored_file import StoredFile
from domain.services.profile_service import ProfileService
from domain.services.upload_service import UploadService

router = APIRouter(prefix="/upload", tags=["uploads"])


def _store(service: UploadService, field: str, upload: UploadFile | None) -> StoredFile:
    if upload is None:
        return service.store(field, None, None, None)
    return service.store(field, upload.filename, upload.content_type, upload.file)


# Upload and delete handlers are sync so disk I/O runs on the thread pool.


@router.post(
    "/photo",
    response_model=PhotoUploadResponse,
    summary="Upload a profile photo",
    responses={
        200: {"description": "Photo uploaded successfully"},
        400: {"model": ErrorResponse, "description": "Missing, oversized or unsupported file"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
def upload_photo(
    request: Request,
    photo: UploadFile | None = File(None, description="JPEG, PNG, GIF or PDF, max 5MB"),
    uploads: UploadService = Depends(get_upload_service),
    profiles: ProfileService = Depends(get_profile_service),
) -> PhotoUploadResponse:
    """Store the file and point the profile photo at it."""
    stored = _store(uploads, "photo", photo)
    profile = profiles.set_photo_url(stored.url)
    return PhotoUploadResponse(
        photo_url=stored.url,
        data=ProfileResponse.model_validate(profile),
    )


@router.post(
    "/resume",
    response_model=ResumeUploadResponse,
    summary="Upload a resume",
    responses={
        200: {"description": "Resume uploaded successfully"},
        400: {"model": ErrorResponse, "description": "Missing, oversized or unsupported file"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
def upload_resume(
    request: Request,
    resume: UploadFile | None = File(None, description="JPEG, PNG, GIF or PDF, max 5MB"),
    uploads: UploadService = Depends(get_upload_service),
    profiles: ProfileService = Depends(get_profile_service),
) -> ResumeUploadResponse:
    """Store the file and point the profile resume at it."""
    stored = _store(uploads, "resume", resume)
    profile = profiles.set_resume_url(stored.url)
    return ResumeUploadResponse(
        resume_url=stored.url,
        data=ProfileResponse.model_validate(profile),
    )


@router.delete(
    "/{filename}",
    response_model=MessageResponse,
    summary="Delete an uploaded file",
    responses={
        200: {"description": "File deleted successfully"},
        404: {"model": ErrorResponse, "description": "File not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
def delete_upload(
    request: Request,
    filename: str,
    uploads: UploadService = Depends(get_upload_service),
) -> MessageResponse:
    """
    Delete a stored file by its generated name.

    The profile is not touched: a photo or resume link pointing at the file
    keeps pointing at it.
    """
    uploads.delete(filename)
    return MessageResponse(message="File deleted successfully")
