"""
Exercise Tracker API - User and Exercise Routes.

Create and list users, log exercises, read a user's exercise log.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from app.dependencies import get_request_body, get_store
from app.schemas.exercise import ExerciseCreateRequest, ExerciseResponse, LogResponse
from app.schemas.user import UserCreateRequest, UserCreatedResponse, UserSummary
from app.services.log_filter import build_log_filter
from app.services.mapper import (
    map_exercise,
    map_log,
    map_user_created,
    map_user_summary,
)
from app.services.store import MongoStore
from app.services.validation import (
    validate_exercise_date,
    validate_exercise_input,
    validate_username,
)
from app.utils.errors import ClientInputError, NotFoundError

logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_body(model, body: Dict[str, Any]):
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise ClientInputError("Invalid request body", detail=str(e))


@router.get("", response_model=List[UserSummary])
async def list_users(store: MongoStore = Depends(get_store)):
    """List all users."""
    users = await store.list_users()
    return [map_user_summary(user) for user in users]


@router.post("", response_model=UserCreatedResponse)
async def create_user(
    body: Dict[str, Any] = Depends(get_request_body),
    store: MongoStore = Depends(get_store)
):
    """Create a user from a ``username`` form or JSON field."""
    request = _parse_body(UserCreateRequest, body)
    username = validate_username(request.username)

    user = await store.create_user(username)
    return map_user_created(user)


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    body: Dict[str, Any] = Depends(get_request_body),
    store: MongoStore = Depends(get_store)
):
    """
    Record an exercise for a user.

    ``description`` and ``duration`` are required; ``date`` defaults
    to now. Responds with the user merged with the exercise fields.
    """
    request = _parse_body(ExerciseCreateRequest, body)
    exercise_input = validate_exercise_input(request.description, request.duration)
    date = validate_exercise_date(request.date)

    user = await store.get_user(user_id)
    if not user:
        raise NotFoundError("Could not find user")

    exercise = await store.add_exercise(
        user_id=user.id,
        description=exercise_input.description,
        duration=exercise_input.duration,
        date=date,
    )
    return map_exercise(user, exercise)


@router.get("/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = None,
    limit: Optional[str] = None,
    store: MongoStore = Depends(get_store)
):
    """
    Get a user's exercise log.

    Optional ``from``/``to`` bound the date inclusively; ``limit`` caps
    the number of entries. Malformed values are ignored.
    """
    user = await store.get_user(user_id)
    if not user:
        raise NotFoundError("Could not find user")

    log_filter = build_log_filter(user.id, from_=from_, to=to, limit=limit)
    exercises = await store.find_exercises(log_filter)
    return map_log(user, exercises)
