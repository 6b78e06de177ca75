"""FastAPI dependencies for dependency injection."""

from fastapi import Depends, Request

from leaderboard_service.datasources import UserDirectory
from leaderboard_service.services import LeaderboardService


def get_datasource(request: Request) -> UserDirectory:
    """Get the user directory attached to the application at creation."""
    datasource = getattr(request.app.state, "datasource", None)
    if datasource is None:
        raise RuntimeError("UserDirectory not initialized. Build the app with create_app().")
    return datasource


def get_leaderboard_service(
    datasource: UserDirectory = Depends(get_datasource),
) -> LeaderboardService:
    """Build a request-scoped leaderboard service."""
    return LeaderboardService(datasource)
