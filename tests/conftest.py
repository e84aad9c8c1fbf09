import itertools
from datetime import datetime
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_store
from app.schemas.exercise import ExerciseRecord
from app.schemas.user import UserRecord
from app.services.log_filter import LogFilter
from app.utils.errors import StoreError
from main import app
from settings import settings


class InMemoryStore:
    """Store double with the same interface as MongoStore."""

    def __init__(self):
        self.users: Dict[str, UserRecord] = {}
        self.exercises: List[ExerciseRecord] = []
        self._ids = itertools.count(1)

    def _next_id(self) -> str:
        return f"{next(self._ids):024x}"

    async def list_users(self) -> List[UserRecord]:
        return list(self.users.values())

    async def create_user(self, username: str) -> UserRecord:
        user = UserRecord(id=self._next_id(), username=username)
        self.users[user.id] = user
        return user

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    async def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: int,
        date: datetime
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=self._next_id(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        self.exercises.append(exercise)
        return exercise

    async def find_exercises(self, log_filter: LogFilter) -> List[ExerciseRecord]:
        query = log_filter.query
        date_range = query.get("date", {})
        matches = [
            e for e in self.exercises
            if e.user_id == query["user_id"]
            and ("$gte" not in date_range or e.date >= date_range["$gte"])
            and ("$lte" not in date_range or e.date <= date_range["$lte"])
        ]
        if log_filter.limit:
            matches = matches[:log_filter.limit]
        return matches


class FailingStore:
    """Store double whose every call fails like a dropped connection."""

    async def _fail(self, *args, **kwargs):
        raise StoreError("Database error", detail="connection refused")

    list_users = _fail
    create_user = _fail
    add_exercise = _fail
    find_exercises = _fail

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        return UserRecord(id=user_id, username="ghost")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store, monkeypatch):
    monkeypatch.setattr(settings, "MONGO_URI", None)
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(monkeypatch):
    monkeypatch.setattr(settings, "MONGO_URI", None)
    app.dependency_overrides[get_store] = lambda: FailingStore()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_id(client):
    r = client.post("/api/users", data={"username": "fcc_test"})
    return r.json()["_id"]
