"""Serves stored uploads back at /uploads/<name>."""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from api.v1.dependencies import get_upload_service
from domain.services.upload_service import UploadService

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.get("/{filename}", summary="Download an uploaded file", include_in_schema=False)
def get_uploaded_file(
    filename: str,
    uploads: UploadService = Depends(get_upload_service),
) -> FileResponse:
    return FileResponse(uploads.locate(filename))
