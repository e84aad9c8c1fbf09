"""
Exercise Tracker API - Exercise Schemas.

Pydantic schemas for exercise submission and the exercise log.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ConfigDict


class ExerciseRecord(BaseModel):
    """
    Stored exercise as returned by the store.

    Attributes:
        id: Store-assigned identifier.
        user_id: Identifier of the owning user.
        description: What was done.
        duration: Duration in minutes.
        date: When it was done (naive UTC).
    """

    id: str
    user_id: str
    description: str
    duration: int
    date: datetime


class ExerciseCreateRequest(BaseModel):
    """
    Schema for an exercise submission.

    Fields arrive as raw form or JSON values and are checked by
    ``app.services.validation`` before anything is stored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "test",
                "duration": "60",
                "date": "1990-01-01"
            }
        }
    )

    description: Optional[str] = Field(None, description="Exercise description")
    duration: Optional[Union[int, float, str]] = Field(
        None,
        description="Duration in minutes"
    )
    date: Optional[str] = Field(
        None,
        description="Date (YYYY-MM-DD); defaults to now"
    )


class ExerciseResponse(BaseModel):
    """Response for an added exercise: the user plus the exercise fields."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "fcc_test",
                "description": "test",
                "duration": 60,
                "date": "Mon Jan 01 1990",
                "_id": "5fb5853f734231456ccb3b05"
            }
        }
    )

    username: str
    description: str
    duration: int
    date: str
    id: str = Field(..., alias="_id", description="User ID")


class LogEntry(BaseModel):
    """Single exercise in a log envelope."""

    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """
    Log envelope.

    Attributes:
        username: Owning user's name.
        count: Number of entries in ``log`` (after any limit).
        id: User ID.
        log: Exercise entries.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str
    count: int
    id: str = Field(..., alias="_id", description="User ID")
    log: List[LogEntry] = Field(default_factory=list)
