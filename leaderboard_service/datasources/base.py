"""Abstract base class for user directories."""

from abc import ABC, abstractmethod
from typing import Optional

from leaderboard_service.models import User


class UserDirectory(ABC):
    """
    Abstract interface for the source of user and point data.

    The leaderboard never owns user data; it reads a fresh snapshot from
    an implementation of this interface on every request.
    """

    @abstractmethod
    async def fetch_all_users(self) -> list[User]:
        """
        Retrieve every user together with their point total.

        Returns:
            List of User objects in upstream order

        Raises:
            UpstreamUnavailable: The call could not complete or timed out
            UpstreamError: The upstream answered with a non-success status
            UpstreamMalformed: The body could not be parsed

        Note:
            Implementation should handle pagination internally if needed.
            A failure on any page aborts the whole fetch; partial results
            are never returned.
        """
        pass

    @abstractmethod
    async def fetch_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a single user.

        Args:
            user_id: Upstream user ID

        Returns:
            The user, or None if the upstream has no such user
        """
        pass

    async def close(self) -> None:
        """
        Clean up resources (e.g., close HTTP sessions).

        Override this if the directory holds resources that need cleanup.
        """
        pass
