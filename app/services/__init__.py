"""Exercise Tracker API - Services Package."""

from .log_filter import LogFilter, build_log_filter
from .store import MongoStore
from .validation import (
    ValidatedExercise,
    validate_exercise_date,
    validate_exercise_input,
    validate_username,
)

__all__ = [
    "LogFilter",
    "build_log_filter",
    "MongoStore",
    "ValidatedExercise",
    "validate_exercise_date",
    "validate_exercise_input",
    "validate_username",
]
