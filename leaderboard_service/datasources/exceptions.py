"""Errors raised while talking to the upstream user service."""

from typing import Optional


class UserServiceError(Exception):
    """Base class for failures fetching data from the user service."""


class UpstreamUnavailable(UserServiceError):
    """The request could not complete (connection failure or timeout)."""


class UpstreamError(UserServiceError):
    """The user service answered with a non-success status."""

    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"user service returned status {status_code}: {body}")


class UpstreamMalformed(UserServiceError):
    """The response body could not be parsed into the expected shape."""


class UserNotFoundError(Exception):
    """No user with the given ID exists upstream."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"user {user_id!r} not found")
