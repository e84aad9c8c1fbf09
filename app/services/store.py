"""
Exercise Tracker API - Document Store.

MongoDB access for users and exercises through the Beanie ODM.
Every driver failure is re-raised as ``StoreError``.
"""

import logging
from datetime import datetime
from typing import List, Optional

from beanie import PydanticObjectId
from beanie.exceptions import CollectionWasNotInitialized
from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo.errors import PyMongoError

from app.models.mongodb import ExerciseDocument, UserDocument
from app.schemas.exercise import ExerciseRecord
from app.schemas.user import UserRecord
from app.services.log_filter import LogFilter
from app.utils.errors import StoreError

logger = logging.getLogger(__name__)

# Driver and BSON encoding failures, plus use before the database was ever connected
STORE_ERRORS = (
    PyMongoError,
    InvalidDocument,
    OverflowError,
    CollectionWasNotInitialized,
)


def _user_record(doc: UserDocument) -> UserRecord:
    return UserRecord(id=str(doc.id), username=doc.username)


def _exercise_record(doc: ExerciseDocument) -> ExerciseRecord:
    return ExerciseRecord(
        id=str(doc.id),
        user_id=doc.user_id,
        description=doc.description,
        duration=doc.duration,
        date=doc.date,
    )


class MongoStore:
    """
    Users and exercises in MongoDB.

    Route handlers receive an instance through the ``get_store``
    dependency, so tests can swap in a double with the same methods.
    """

    async def list_users(self) -> List[UserRecord]:
        """Return every user."""
        try:
            users = await UserDocument.find_all().to_list()
        except STORE_ERRORS as e:
            logger.error(f"Error listing users: {e}")
            raise StoreError("Could not retrieve users", detail=str(e))
        return [_user_record(user) for user in users]

    async def create_user(self, username: str) -> UserRecord:
        """
        Insert a user.

        Args:
            username: Validated username.

        Returns:
            UserRecord: The stored user with its assigned ID.

        Raises:
            StoreError: If the insert fails.
        """
        try:
            user = UserDocument(username=username)
            await user.insert()
        except STORE_ERRORS as e:
            logger.error(f"Error creating user: {e}")
            raise StoreError("Could not create user", detail=str(e))
        logger.info(f"Created user {user.id}")
        return _user_record(user)

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        """
        Look up a user by ID.

        Malformed IDs cannot match any document and yield None.
        """
        if not ObjectId.is_valid(user_id):
            return None
        try:
            user = await UserDocument.get(PydanticObjectId(user_id))
        except STORE_ERRORS as e:
            logger.error(f"Error loading user {user_id}: {e}")
            raise StoreError("Could not retrieve user", detail=str(e))
        return _user_record(user) if user else None

    async def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: int,
        date: datetime
    ) -> ExerciseRecord:
        """
        Insert an exercise for an existing user.

        Args:
            user_id: Owning user's ID (already checked to exist).
            description: Validated description.
            duration: Duration in minutes.
            date: Exercise date.

        Returns:
            ExerciseRecord: The stored exercise.

        Raises:
            StoreError: If the insert fails.
        """
        try:
            exercise = ExerciseDocument(
                user_id=user_id,
                description=description,
                duration=duration,
                date=date,
            )
            await exercise.insert()
        except STORE_ERRORS as e:
            logger.error(f"Error saving exercise: {e}")
            raise StoreError("Error saving exercise", detail=str(e))
        return _exercise_record(exercise)

    async def find_exercises(self, log_filter: LogFilter) -> List[ExerciseRecord]:
        """Return exercises matching the filter, in insertion order."""
        try:
            query = ExerciseDocument.find(log_filter.query)
            if log_filter.limit:
                query = query.limit(log_filter.limit)
            exercises = await query.to_list()
        except STORE_ERRORS as e:
            logger.error(f"Error loading exercises: {e}")
            raise StoreError("Could not retrieve exercises", detail=str(e))
        return [_exercise_record(exercise) for exercise in exercises]
