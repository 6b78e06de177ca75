"""Leaderboard service combining user directory fetches with ranking."""

import logging
from typing import Any, Optional, Union

from leaderboard_service.datasources import UserDirectory, UserNotFoundError
from leaderboard_service.models import (
    LeaderboardResponse,
    RankedUserResponse,
    UnrankedUserResponse,
)
from .ranking import LeaderboardComputer

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Service for generating the points leaderboard."""

    def __init__(
        self,
        datasource: UserDirectory,
        computer: Optional[LeaderboardComputer] = None,
    ):
        self.datasource = datasource
        self.computer = computer or LeaderboardComputer()

    async def full_leaderboard(self) -> LeaderboardResponse:
        """Fetch all users and rank every public one."""
        users = await self.datasource.fetch_all_users()
        return self.computer.full_leaderboard(users)

    async def top_n(self, limit: Any) -> LeaderboardResponse:
        """
        Fetch all users and return the top ``limit`` entries.

        Args:
            limit: Raw limit as received; invalid values default to 10

        Returns:
            LeaderboardResponse with at most ``limit`` entries
        """
        users = await self.datasource.fetch_all_users()
        return self.computer.top_n(users, limit)

    async def rank_of(
        self, user_id: str
    ) -> Union[RankedUserResponse, UnrankedUserResponse]:
        """
        Get a single user's rank and tier.

        The user is fetched on its own first to confirm it exists, then
        the full directory is fetched to find its position. The two
        fetches are independent upstream calls.

        Raises:
            UserNotFoundError: The user service has no such user
        """
        user = await self.datasource.fetch_user_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        users = await self.datasource.fetch_all_users()
        result = self.computer.rank_of(user_id, users, user=user)

        if isinstance(result, UnrankedUserResponse):
            logger.debug(f"User {user_id} is not in the public leaderboard")
        return result
