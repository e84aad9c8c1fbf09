"""
Exercise Tracker API - Response Mapping.

Shapes stored records into the external JSON contract.
"""

from typing import List

from app.schemas.exercise import (
    ExerciseRecord,
    ExerciseResponse,
    LogEntry,
    LogResponse,
)
from app.schemas.user import UserCreatedResponse, UserRecord, UserSummary
from app.utils.dates import format_date_string


def map_user_summary(user: UserRecord) -> UserSummary:
    """User listing entry: ``{_id, username}``."""
    return UserSummary(id=user.id, username=user.username)


def map_user_created(user: UserRecord) -> UserCreatedResponse:
    """Created user: ``{username, _id}``."""
    return UserCreatedResponse(username=user.username, id=user.id)


def map_exercise(user: UserRecord, exercise: ExerciseRecord) -> ExerciseResponse:
    """Exercise fields merged with the owning user; ``_id`` is the user's."""
    return ExerciseResponse(
        username=user.username,
        description=exercise.description,
        duration=exercise.duration,
        date=format_date_string(exercise.date),
        id=user.id,
    )


def map_log_entry(exercise: ExerciseRecord) -> LogEntry:
    """Log entry without identifiers."""
    return LogEntry(
        description=exercise.description,
        duration=exercise.duration,
        date=format_date_string(exercise.date),
    )


def map_log(user: UserRecord, exercises: List[ExerciseRecord]) -> LogResponse:
    """
    Build the log envelope.

    ``count`` is the number of entries actually returned, so it
    reflects any limit that was applied.
    """
    log = [map_log_entry(exercise) for exercise in exercises]
    return LogResponse(
        username=user.username,
        count=len(log),
        id=user.id,
        log=log,
    )
