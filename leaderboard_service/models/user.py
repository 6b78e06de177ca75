"""User model representing a single user record from the user service."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """
    User snapshot as returned by the user service.

    Only the fields needed for ranking are kept; anything else the
    upstream sends is ignored.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    user_id: str = Field(alias="id", description="Upstream user ID")
    username: str
    profile_picture: Optional[str] = Field(alias="profilePicture", default=None)
    points: int = Field(default=0, description="Total points, 0 if absent")
    is_private: bool = Field(alias="isProfilePrivate", default=False)
    created_at: Any = Field(
        alias="createdAt",
        default=None,
        description="Creation timestamp, passed through as sent",
    )

    @field_validator("points", mode="before")
    @classmethod
    def _points_default(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("is_private", mode="before")
    @classmethod
    def _private_default(cls, value: Any) -> Any:
        return False if value is None else value
