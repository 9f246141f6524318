"""Dependency injection factories for API v1."""

import threading
from functools import lru_cache

from core.config import settings
from domain.entities.profile import default_profile
from domain.services.profile_service import ProfileService
from domain.services.upload_service import UploadService
from infrastructure.storage.local_storage import LocalFileStorage


@lru_cache
def get_file_storage() -> LocalFileStorage:
    """Get local upload storage instance."""
    return LocalFileStorage(settings.upload_dir)


@lru_cache
def get_profile_service() -> ProfileService:
    """Get the process-wide Profile service instance."""
    return ProfileService(default_profile(), lock=threading.Lock())


@lru_cache
def get_upload_service() -> UploadService:
    """Get Upload service instance."""
    return UploadService(get_file_storage(), max_bytes=settings.max_upload_bytes)
