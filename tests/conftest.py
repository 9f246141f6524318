"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("APP_ENV", "development")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.profile import default_profile
from domain.services.profile_service import ProfileService
from domain.services.upload_service import UploadService
from infrastructure.storage.local_storage import LocalFileStorage

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


@pytest.fixture
def profile_service() -> ProfileService:
    """A fresh profile service seeded with the default profile."""
    return ProfileService(default_profile())


@pytest.fixture
def upload_root(tmp_path: Path) -> Path:
    """Upload directory that does not exist yet."""
    return tmp_path / "uploads"


@pytest.fixture
def storage(upload_root: Path) -> LocalFileStorage:
    return LocalFileStorage(upload_root)


@pytest.fixture
def upload_service(storage: LocalFileStorage) -> UploadService:
    return UploadService(storage, max_bytes=MAX_UPLOAD_BYTES)


@pytest.fixture
def app(profile_service: ProfileService, upload_service: UploadService) -> FastAPI:
    """
    Create an app wired to per-test services.

    Each test gets its own profile record and a temporary upload directory.
    """
    from api.v1.dependencies import get_profile_service, get_upload_service
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_upload_service] = lambda: upload_service
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
