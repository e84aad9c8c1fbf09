"""Exercise Tracker API - Pydantic Schemas Package."""

from app.schemas.user import (
    UserRecord,
    UserCreateRequest,
    UserSummary,
    UserCreatedResponse,
)
from app.schemas.exercise import (
    ExerciseRecord,
    ExerciseCreateRequest,
    ExerciseResponse,
    LogEntry,
    LogResponse,
)

__all__ = [
    # User
    "UserRecord",
    "UserCreateRequest",
    "UserSummary",
    "UserCreatedResponse",
    # Exercise
    "ExerciseRecord",
    "ExerciseCreateRequest",
    "ExerciseResponse",
    "LogEntry",
    "LogResponse",
]
