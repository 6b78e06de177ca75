"""Unit tests for LeaderboardService orchestration."""

import pytest

from leaderboard_service.datasources import UpstreamError, UserNotFoundError
from leaderboard_service.models import RankedUserResponse, UnrankedUserResponse
from leaderboard_service.services import LeaderboardService
from tests.conftest import InMemoryUserDirectory


@pytest.mark.asyncio
class TestLeaderboardService:
    async def test_full_leaderboard(self, directory, computer):
        service = LeaderboardService(directory, computer)

        result = await service.full_leaderboard()

        assert [e.userId for e in result.leaderboard] == ["a", "b"]
        assert directory.calls == ["all"]

    async def test_top_n(self, directory, computer):
        service = LeaderboardService(directory, computer)

        result = await service.top_n("1")

        assert [e.userId for e in result.leaderboard] == ["a"]
        assert result.totalUsers == 2

    async def test_rank_of_fetches_user_then_listing(self, directory, computer):
        service = LeaderboardService(directory, computer)

        result = await service.rank_of("b")

        assert isinstance(result, RankedUserResponse)
        assert result.rank == 2
        assert directory.calls == ["user:b", "all"]

    async def test_rank_of_unranked(self, directory, computer):
        result = await LeaderboardService(directory, computer).rank_of("c")

        assert isinstance(result, UnrankedUserResponse)
        assert result.rank == 0

    async def test_rank_of_unknown_skips_listing(self, directory, computer):
        service = LeaderboardService(directory, computer)

        with pytest.raises(UserNotFoundError):
            await service.rank_of("Z")

        assert directory.calls == ["user:Z"]

    @pytest.mark.parametrize("operation", ["full", "top", "rank"])
    async def test_upstream_failure_propagates(self, sample_users, computer, operation):
        directory = InMemoryUserDirectory(
            sample_users, error=UpstreamError(502, "bad gateway")
        )
        service = LeaderboardService(directory, computer)

        with pytest.raises(UpstreamError):
            if operation == "full":
                await service.full_leaderboard()
            elif operation == "top":
                await service.top_n(5)
            else:
                await service.rank_of("a")
