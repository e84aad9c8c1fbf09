"""
Exercise Tracker API - Request Validation.

Presence and type checks applied to request bodies before anything
touches the store.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from app.utils.dates import parse_date, parse_int, utcnow
from app.utils.errors import ClientInputError, InvalidNumberError, MissingFieldError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class ValidatedExercise:
    """Exercise fields that passed validation."""

    description: str
    duration: int


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def validate_username(username: Optional[str]) -> str:
    """
    Check that a username was supplied.

    Raises:
        MissingFieldError: If username is absent or empty.
    """
    if _is_blank(username):
        raise MissingFieldError("Username is required")
    return username


def validate_exercise_input(
    description: Optional[str],
    duration: Union[int, float, str, None]
) -> ValidatedExercise:
    """
    Validate the required exercise fields and coerce duration.

    0 and negative durations are accepted; values that do not fit a
    64-bit BSON integer are rejected.

    Args:
        description: Raw description.
        duration: Raw duration (string from a form or a JSON number).

    Returns:
        ValidatedExercise: Description and integer duration.

    Raises:
        MissingFieldError: If description or duration is absent or empty.
        InvalidNumberError: If duration does not parse as an integer
            or is out of range.
    """
    if _is_blank(description) or _is_blank(duration):
        raise MissingFieldError("Description and duration are required fields.")

    duration_int = parse_int(duration)
    if duration_int is None:
        raise InvalidNumberError("Duration must be a number.")
    if not INT64_MIN <= duration_int <= INT64_MAX:
        raise InvalidNumberError("Duration is out of range.")

    return ValidatedExercise(description=description, duration=duration_int)


def validate_exercise_date(value: Optional[str]) -> datetime:
    """
    Resolve the exercise date, defaulting to now when omitted.

    Raises:
        ClientInputError: If a date was given but cannot be parsed.
    """
    if _is_blank(value):
        return utcnow()
    parsed = parse_date(value)
    if parsed is None:
        raise ClientInputError("Date must be in YYYY-MM-DD format.")
    return parsed
