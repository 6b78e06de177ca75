"""Application configuration."""

import os
from dataclasses import dataclass, field

DEFAULT_USER_SERVICE_URL = "http://user-service:5000"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173,http://localhost"


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # API settings
    host: str = "0.0.0.0"
    port: int = 8080

    # Upstream user service
    user_service_url: str = DEFAULT_USER_SERVICE_URL
    request_timeout: float = 10.0
    page_size: int = 100

    cors_origins: list[str] = field(
        default_factory=lambda: _split_origins(DEFAULT_CORS_ORIGINS)
    )
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8080")),
            user_service_url=os.getenv(
                "USER_SERVICE_URL",
                DEFAULT_USER_SERVICE_URL
            ),
            request_timeout=float(os.getenv("USER_SERVICE_TIMEOUT", "10.0")),
            page_size=int(os.getenv("USER_SERVICE_PAGE_SIZE", "100")),
            cors_origins=_split_origins(
                os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
