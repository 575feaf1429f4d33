"""Shared fixtures: API client and an in-memory stand-in for the DB session."""
from collections import deque
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from overload.db.session import get_db
from overload.main import app


class FakeResult:
    """Wraps one canned query answer: a scalar, a single row or a list of rows."""

    def __init__(self, value):
        self._value = value

    def scalar(self):
        return self._value

    def scalar_one_or_none(self):
        return self._value

    def scalars(self):
        return self

    def all(self):
        return list(self._value)


class FakeSession:
    """
    Just enough of AsyncSession for the endpoints.

    Queries are answered in order from `results`; tests queue one value per
    execute() the endpoint makes. Executed statements are kept for inspection.
    """

    def __init__(self):
        self.added = []
        self.deleted = []
        self.results = deque()
        self.statements = []

    def queue(self, *values):
        self.results.extend(values)

    async def execute(self, statement):
        self.statements.append(statement)
        if not self.results:
            raise AssertionError(f"Unexpected query: {statement}")
        return FakeResult(self.results.popleft())

    def add(self, obj):
        self.added.append(obj)

    async def delete(self, obj):
        self.deleted.append(obj)

    async def flush(self):
        for i, obj in enumerate(self.added, start=1):
            if obj.id is None:
                obj.id = i
            if hasattr(obj, "date") and obj.date is None:
                obj.date = datetime.now(timezone.utc)

    async def refresh(self, obj):
        pass

    async def commit(self):
        pass

    async def rollback(self):
        pass

    async def close(self):
        pass


@pytest.fixture
def api_client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def fake_db():
    session = FakeSession()

    async def _override():
        yield session

    app.dependency_overrides[get_db] = _override
    yield session
    app.dependency_overrides.pop(get_db, None)
