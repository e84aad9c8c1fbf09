"""
Exercise Tracker API - FastAPI Dependencies.

Dependency injection helpers for routes.
"""

import json
import logging
from typing import Any, Dict

from fastapi import Request

from app.services.store import MongoStore
from app.utils.errors import ClientInputError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = (
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)


def get_store() -> MongoStore:
    """
    Get the document store used by route handlers.

    Override with ``app.dependency_overrides[get_store]`` in tests.

    Returns:
        MongoStore: Store bound to the initialised Beanie models.
    """
    return MongoStore()


async def get_request_body(request: Request) -> Dict[str, Any]:
    """
    Read a request body sent either as JSON or as a form.

    Args:
        request: Incoming request.

    Returns:
        Dict[str, Any]: Body fields; empty when there is no body.

    Raises:
        ClientInputError: If a JSON body is malformed or not an object.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Rejected malformed JSON body: {e}")
        raise ClientInputError("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise ClientInputError("Request body must be a JSON object")
    return body
