"""Profile API routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileResponse,
    ProfileStatsDetailResponse,
    ProfileStatsResponse,
    ProfileUpdateResponse,
)
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileDetailResponse,
    summary="Get the profile",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Return the current profile record."""
    return ProfileDetailResponse(data=ProfileResponse.model_validate(service.get()))


@router.put(
    "",
    response_model=ProfileUpdateResponse,
    summary="Update the profile",
    responses={
        200: {"description": "Profile updated successfully"},
        400: {"model": ErrorResponse, "description": "Validation error"},
    },
)
@limiter.limit("20/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    payload: dict[str, Any] = Body(...),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileUpdateResponse:
    """
    Partially update the profile.

    Only the fields sent are changed. Photo and resume links are set through
    the upload endpoints and are rejected here.
    """
    profile = service.update(payload)
    return ProfileUpdateResponse(data=ProfileResponse.model_validate(profile))


@router.get(
    "/stats",
    response_model=ProfileStatsDetailResponse,
    summary="Get profile statistics",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def get_profile_stats(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileStatsDetailResponse:
    """Dashboard statistics. The view counter is mock data."""
    return ProfileStatsDetailResponse(
        data=ProfileStatsResponse.model_validate(service.stats())
    )
