"""Leaderboard models for API responses."""

from datetime import datetime
from typing import Any, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict


class LeaderboardEntry(BaseModel):
    """
    A single entry in the leaderboard.
    """
    model_config = ConfigDict(populate_by_name=True)

    userId: str
    username: str
    profilePicture: Optional[str] = None
    points: int
    isProfilePrivate: bool = False
    createdAt: Any = None
    rank: int = Field(description="1-based position among public-ranked users")
    tier: str


class LeaderboardResponse(BaseModel):
    """Ranked leaderboard, either complete or truncated to the top N."""

    leaderboard: list[LeaderboardEntry]
    totalUsers: int = Field(description="Number of public-ranked users")
    updatedAt: datetime


class RankedUserResponse(BaseModel):
    """Rank lookup result for a user present in the public leaderboard."""

    id: str
    username: str
    profilePicture: Optional[str] = None
    points: int
    isProfilePrivate: bool = False
    createdAt: Any = None
    rank: int
    tier: str
    totalUsers: int


class UnrankedUserResponse(BaseModel):
    """Rank lookup result for a private user or a user without points."""

    message: str = "User not in public leaderboard"
    userId: str
    username: str
    points: int
    rank: Literal[0] = 0
    tier: Literal["Unranked"] = "Unranked"


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str = "healthy"
    service: str
    version: str
    timestamp: str
    uptime: int = Field(description="Seconds since startup")
    dependencies: dict[str, str]
