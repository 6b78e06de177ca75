from .ranking import (
    LeaderboardComputer,
    Tier,
    calculate_tier,
    clamp_limit,
    is_public_ranked,
    rank_users,
)
from .leaderboard_service import LeaderboardService

__all__ = [
    "LeaderboardComputer",
    "LeaderboardService",
    "Tier",
    "calculate_tier",
    "clamp_limit",
    "is_public_ranked",
    "rank_users",
]
