"""Ranking and tier computation for the points leaderboard."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union

from leaderboard_service.datasources.exceptions import UserNotFoundError
from leaderboard_service.models import (
    User,
    LeaderboardEntry,
    LeaderboardResponse,
    RankedUserResponse,
    UnrankedUserResponse,
)

DEFAULT_TOP_LIMIT = 10


class Tier(str, Enum):
    """Rank-derived tier labels."""
    CHAMPION = "Champion"
    MASTER = "Master"
    PRO = "Pro"
    ELITE = "Elite"
    NEWBIE = "Newbie"
    UNRANKED = "Unranked"


def calculate_tier(rank: int) -> Tier:
    """Map a 1-based rank to its tier. Ranks below 1 are Unranked."""
    if rank < 1:
        return Tier.UNRANKED
    if rank == 1:
        return Tier.CHAMPION
    if rank == 2:
        return Tier.MASTER
    if rank == 3:
        return Tier.PRO
    if rank <= 10:
        return Tier.ELITE
    return Tier.NEWBIE


def is_public_ranked(user: User) -> bool:
    """A user is ranked only with a public profile and a positive score."""
    return not user.is_private and user.points > 0


def rank_users(users: Iterable[User]) -> list[User]:
    """
    Filter out unranked users and order the rest.

    Points descending, ties broken by username ascending, so the order
    does not depend on how the upstream sorted its response.
    """
    public_users = [u for u in users if is_public_ranked(u)]
    public_users.sort(key=lambda u: (-u.points, u.username))
    return public_users


def clamp_limit(value: Any, available: int) -> int:
    """
    Turn a raw top-N limit into a usable slice size.

    Non-numeric or non-positive values fall back to 10; values larger
    than the number of ranked users are cut down to that number.
    """
    try:
        limit = int(value)
    except (TypeError, ValueError):
        limit = DEFAULT_TOP_LIMIT

    if limit <= 0:
        limit = DEFAULT_TOP_LIMIT
    return min(limit, available)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LeaderboardComputer:
    """Pure transformation from a user snapshot to leaderboard views."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self.clock = clock

    def _entries(self, ranked: list[User]) -> list[LeaderboardEntry]:
        return [
            LeaderboardEntry(
                userId=user.user_id,
                username=user.username,
                profilePicture=user.profile_picture,
                points=user.points,
                isProfilePrivate=user.is_private,
                createdAt=user.created_at,
                rank=i + 1,
                tier=calculate_tier(i + 1).value,
            )
            for i, user in enumerate(ranked)
        ]

    def full_leaderboard(self, users: Iterable[User]) -> LeaderboardResponse:
        """Rank every public user."""
        ranked = rank_users(users)
        return LeaderboardResponse(
            leaderboard=self._entries(ranked),
            totalUsers=len(ranked),
            updatedAt=self.clock(),
        )

    def top_n(self, users: Iterable[User], limit: Any) -> LeaderboardResponse:
        """
        Rank public users and keep the first ``limit`` entries.

        ``totalUsers`` still reports every ranked user, not the slice size.
        """
        ranked = rank_users(users)
        limit = clamp_limit(limit, len(ranked))
        return LeaderboardResponse(
            leaderboard=self._entries(ranked[:limit]),
            totalUsers=len(ranked),
            updatedAt=self.clock(),
        )

    def rank_of(
        self,
        user_id: str,
        users: Iterable[User],
        user: Optional[User] = None,
    ) -> Union[RankedUserResponse, UnrankedUserResponse]:
        """
        Locate one user in the leaderboard.

        Args:
            user_id: ID of the user to look up
            users: Full user snapshot used to compute the position
            user: Separately fetched record for ``user_id``. When given,
                its fields are reported; otherwise the record is taken
                from ``users``.

        Raises:
            UserNotFoundError: ``user`` is None and no user in ``users``
                has ``user_id``
        """
        users = list(users)
        if user is None:
            user = next((u for u in users if u.user_id == user_id), None)
            if user is None:
                raise UserNotFoundError(user_id)

        ranked = rank_users(users)
        rank = next(
            (i + 1 for i, u in enumerate(ranked) if u.user_id == user_id),
            0,
        )

        if rank == 0:
            return UnrankedUserResponse(
                userId=user.user_id,
                username=user.username,
                points=user.points,
            )

        return RankedUserResponse(
            id=user.user_id,
            username=user.username,
            profilePicture=user.profile_picture,
            points=user.points,
            isProfilePrivate=user.is_private,
            createdAt=user.created_at,
            rank=rank,
            tier=calculate_tier(rank).value,
            totalUsers=len(ranked),
        )
