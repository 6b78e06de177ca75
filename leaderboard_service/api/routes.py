"""API routes for the leaderboard service."""

from typing import Union

from fastapi import APIRouter, Depends, HTTPException, Path

from leaderboard_service.models import (
    LeaderboardResponse,
    RankedUserResponse,
    UnrankedUserResponse,
)
from leaderboard_service.services import LeaderboardService
from .dependencies import get_leaderboard_service

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.get("/", response_model=LeaderboardResponse)
async def get_leaderboard(
    service: LeaderboardService = Depends(get_leaderboard_service),
) -> LeaderboardResponse:
    """
    Get the complete leaderboard.

    Private profiles and users without points are left out.
    Returns: leaderboard[], totalUsers, updatedAt
    """
    return await service.full_leaderboard()


@router.get("/user/", include_in_schema=False)
async def get_user_rank_missing_id():
    raise HTTPException(status_code=400, detail="User ID is required")


@router.get(
    "/user/{user_id}",
    response_model=Union[RankedUserResponse, UnrankedUserResponse],
)
async def get_user_rank(
    user_id: str = Path(
        ...,
        description="User ID",
        examples=["3f1c2a9e-5b7d-4e2a-9c8f-1a2b3c4d5e6f"],
    ),
    service: LeaderboardService = Depends(get_leaderboard_service),
) -> Union[RankedUserResponse, UnrankedUserResponse]:
    """
    Get a user's rank and tier.

    Users outside the public leaderboard are reported with rank 0 and
    tier "Unranked". Unknown users get a 404.
    """
    if not user_id.strip():
        raise HTTPException(status_code=400, detail="User ID is required")
    return await service.rank_of(user_id.strip())


@router.get("/top/{limit}", response_model=LeaderboardResponse)
async def get_top_users(
    limit: str = Path(
        ...,
        description="Number of entries; invalid or non-positive values mean 10",
        examples=["10"],
    ),
    service: LeaderboardService = Depends(get_leaderboard_service),
) -> LeaderboardResponse:
    """
    Get the top N users from the leaderboard.

    totalUsers reports all ranked users, not only the returned ones.
    """
    return await service.top_n(limit)
