"""
Exercise Tracker API - User Schemas.

Pydantic schemas for user creation and listing.
"""

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class UserRecord(BaseModel):
    """
    Stored user as returned by the store.

    Attributes:
        id: Store-assigned identifier (24-hex ObjectId string).
        username: User's name.
    """

    id: str
    username: str


class UserCreateRequest(BaseModel):
    """
    Schema for creating a new user.

    ``username`` is optional at the schema level so that a missing
    value reaches the validator and is reported as a client error.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "fcc_test"
            }
        }
    )

    username: Optional[str] = Field(None, description="User's name")


class UserSummary(BaseModel):
    """One entry of the user listing: ``{_id, username}``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User ID")
    username: str = Field(..., description="User's name")


class UserCreatedResponse(BaseModel):
    """Response for a created user: ``{username, _id}``."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "fcc_test",
                "_id": "5fb5853f734231456ccb3b05"
            }
        }
    )

    username: str = Field(..., description="User's name")
    id: str = Field(..., alias="_id", description="User ID")
