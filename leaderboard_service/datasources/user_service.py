"""User service HTTP data source implementation."""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from leaderboard_service.models import User
from .base import UserDirectory
from .exceptions import UpstreamError, UpstreamMalformed, UpstreamUnavailable

logger = logging.getLogger(__name__)

# API constants
DEFAULT_BASE_URL = "http://user-service:5000"
USERS_LIST_PATH = "/api/users/leaderboard/all"
USER_BY_ID_PATH = "/api/users/{user_id}"
MAX_PAGE_SIZE = 100
REQUEST_TIMEOUT = 10.0


class UserServiceDataSource(UserDirectory):
    """
    User directory backed by the user service REST API.

    The listing endpoint may answer with a bare JSON array or with a
    paginated envelope ``{"users": [...], "pagination": {...}}``. Pages
    are requested one after another until ``totalPages`` is reached.

    Limitations:
    - Single attempt per request, no retries
    - Page size is capped by the upstream at 100
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        page_size: int = MAX_PAGE_SIZE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the user service data source.

        Args:
            base_url: Base URL of the user service
            timeout: Per-request timeout in seconds
            page_size: Number of users requested per listing page
            transport: Optional httpx transport, used in tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = max(1, min(page_size, MAX_PAGE_SIZE))
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def _get(
        self,
        path: str,
        params: Optional[dict] = None,
    ) -> httpx.Response:
        """
        Issue a single GET request, mapping transport failures.

        Status codes are left for the caller to interpret.
        """
        client = await self._get_client()

        try:
            return await client.get(path, params=params, timeout=self.timeout)

        except httpx.TimeoutException as e:
            logger.warning(f"Request to {path} timed out after {self.timeout}s")
            raise UpstreamUnavailable(
                f"request to user service timed out: {path}"
            ) from e

        except httpx.RequestError as e:
            logger.error(f"Request to {path} failed: {e}")
            raise UpstreamUnavailable(
                f"failed to reach user service: {e}"
            ) from e

    @staticmethod
    def _check_status(response: httpx.Response) -> None:
        if not response.is_success:
            logger.error(
                f"User service returned error status {response.status_code}: {response.text}"
            )
            raise UpstreamError(
                status_code=response.status_code,
                body=response.text,
                url=str(response.request.url),
            )

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Failed to decode response from {response.request.url}: {e}")
            raise UpstreamMalformed(f"failed to decode user service response: {e}") from e

    @staticmethod
    def _parse_users(items: Any) -> list[User]:
        if not isinstance(items, list):
            raise UpstreamMalformed(
                f"expected a list of users, got {type(items).__name__}"
            )
        try:
            return [User.model_validate(item) for item in items]
        except ValidationError as e:
            logger.error(f"Invalid user object in response: {e}")
            raise UpstreamMalformed(f"invalid user object: {e}") from e

    @staticmethod
    def _total_pages(envelope: dict) -> Optional[int]:
        """Read ``pagination.totalPages``; None means a single page."""
        pagination = envelope.get("pagination")
        if pagination is None:
            return None
        if not isinstance(pagination, dict):
            raise UpstreamMalformed("pagination must be an object")

        total_pages = pagination.get("totalPages")
        if total_pages is None:
            return None
        if isinstance(total_pages, bool) or not isinstance(total_pages, int):
            raise UpstreamMalformed(f"invalid totalPages: {total_pages!r}")
        return total_pages

    async def fetch_all_users(self) -> list[User]:
        """
        Retrieve all users with their points.

        Uses the listing endpoint with pagination to fetch every page.
        """
        all_users: list[User] = []
        page = 1

        while True:
            params = {"limit": self.page_size, "page": page}
            logger.info(f"Fetching users from {self.base_url}{USERS_LIST_PATH} (page {page})")

            response = await self._get(USERS_LIST_PATH, params=params)
            self._check_status(response)
            data = self._decode(response)

            # Unpaginated variant: the whole directory in one array
            if isinstance(data, list):
                all_users.extend(self._parse_users(data))
                break

            if not isinstance(data, dict) or "users" not in data:
                raise UpstreamMalformed(
                    "expected a list of users or an object with a 'users' field"
                )

            batch = self._parse_users(data["users"])
            all_users.extend(batch)
            total_pages = self._total_pages(data)

            logger.info(
                f"Fetched page {page}: {len(batch)} users (total so far: {len(all_users)})"
            )

            if total_pages is None or page >= total_pages:
                break
            page += 1

        logger.info(f"Successfully fetched total of {len(all_users)} users")
        return all_users

    async def fetch_user_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve a single user, or None if the user service returns 404."""
        path = USER_BY_ID_PATH.format(user_id=quote(user_id, safe=""))

        response = await self._get(path)
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info(f"User {user_id} not found in user service")
            return None

        self._check_status(response)
        data = self._decode(response)

        if not isinstance(data, dict):
            raise UpstreamMalformed(
                f"expected a user object, got {type(data).__name__}"
            )
        try:
            return User.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid user object for {user_id}: {e}")
            raise UpstreamMalformed(f"invalid user object: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
