from .user import User
from .leaderboard import (
    LeaderboardEntry,
    LeaderboardResponse,
    RankedUserResponse,
    UnrankedUserResponse,
    HealthResponse,
)

__all__ = [
    "User",
    "LeaderboardEntry",
    "LeaderboardResponse",
    "RankedUserResponse",
    "UnrankedUserResponse",
    "HealthResponse",
]
