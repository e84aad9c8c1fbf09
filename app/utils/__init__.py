"""Exercise Tracker API - Utilities Package."""

from app.utils.dates import format_date_string, parse_date, parse_int
from app.utils.errors import (
    ExerciseTrackerException,
    ClientInputError,
    MissingFieldError,
    InvalidNumberError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "format_date_string",
    "parse_date",
    "parse_int",
    "ExerciseTrackerException",
    "ClientInputError",
    "MissingFieldError",
    "InvalidNumberError",
    "NotFoundError",
    "StoreError",
]
