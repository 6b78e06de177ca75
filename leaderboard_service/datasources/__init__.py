from .base import UserDirectory
from .user_service import UserServiceDataSource
from .exceptions import (
    UserServiceError,
    UpstreamUnavailable,
    UpstreamError,
    UpstreamMalformed,
    UserNotFoundError,
)

__all__ = [
    "UserDirectory",
    "UserServiceDataSource",
    "UserServiceError",
    "UpstreamUnavailable",
    "UpstreamError",
    "UpstreamMalformed",
    "UserNotFoundError",
]
