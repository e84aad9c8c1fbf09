"""
Exercise Tracker API - MongoDB Models Package.

Export all Beanie ODM models for MongoDB operations.
"""

from app.models.mongodb import (
    UserDocument,
    ExerciseDocument,
)

DOCUMENT_MODELS = [
    UserDocument,
    ExerciseDocument,
]

__all__ = [
    "UserDocument",
    "ExerciseDocument",
    "DOCUMENT_MODELS",
]
