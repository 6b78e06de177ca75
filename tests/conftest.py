"""
Shared fixtures for the leaderboard service tests.

Unit tests exercise the ranking functions and the HTTP data source against
an ``httpx.MockTransport``; integration tests drive the FastAPI app through
``TestClient`` with an in-memory user directory.
"""

from datetime import datetime, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from leaderboard_service.app import create_app
from leaderboard_service.config import Config
from leaderboard_service.datasources import UserDirectory
from leaderboard_service.models import User
from leaderboard_service.services import LeaderboardComputer

FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_user(
    user_id: str,
    username: Optional[str] = None,
    points: int = 0,
    is_private: bool = False,
    **extra,
) -> User:
    """Build a User the way the upstream would send it."""
    payload = {
        "id": user_id,
        "username": username if username is not None else user_id,
        "points": points,
        "isProfilePrivate": is_private,
        "profilePicture": extra.pop("profile_picture", None),
        "createdAt": extra.pop("created_at", None),
    }
    payload.update(extra)
    return User.model_validate(payload)


class InMemoryUserDirectory(UserDirectory):
    """User directory serving a fixed list, optionally failing on demand."""

    def __init__(self, users: list[User], error: Optional[Exception] = None):
        self.users = list(users)
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def fetch_all_users(self) -> list[User]:
        self.calls.append("all")
        if self.error is not None:
            raise self.error
        return list(self.users)

    async def fetch_user_by_id(self, user_id: str) -> Optional[User]:
        self.calls.append(f"user:{user_id}")
        return next((u for u in self.users if u.user_id == user_id), None)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def sample_users() -> list[User]:
    """Four users: two tied public, one private, one without points."""
    return [
        make_user("b", "B", points=100),
        make_user("c", "C", points=50, is_private=True),
        make_user("a", "A", points=100),
        make_user("d", "D", points=0),
    ]


@pytest.fixture
def computer() -> LeaderboardComputer:
    return LeaderboardComputer(clock=lambda: FIXED_NOW)


@pytest.fixture
def directory(sample_users) -> InMemoryUserDirectory:
    return InMemoryUserDirectory(sample_users)


@pytest.fixture
def test_config() -> Config:
    return Config(user_service_url="http://users.test")


@pytest.fixture
def client(test_config, directory):
    app = create_app(test_config, datasource=directory)
    with TestClient(app) as test_client:
        yield test_client
