"""Points leaderboard service built on top of the user service."""

SERVICE_NAME = "leaderboard-service"
__version__ = "1.0.0"
