"""
Exercise Tracker MongoDB Document Models.

Beanie ODM models for the users and exercises collections.
"""

from datetime import datetime

from beanie import Document, Indexed
from pydantic import Field

from app.utils.dates import utcnow


class UserDocument(Document):
    """User model for MongoDB."""

    username: str

    class Settings:
        name = "users"  # Collection name in MongoDB


class ExerciseDocument(Document):
    """Exercise model for MongoDB."""

    user_id: Indexed(str)  # String form of the owning user's _id
    description: str
    duration: int  # Minutes
    date: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "exercises"
        indexes = [
            "date",
        ]
