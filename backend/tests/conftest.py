"""
Shared fixtures: an in-memory stand-in for the Supabase REST datastore and
an ASGI client wired to it through dependency overrides.
"""

import copy

import pytest
from httpx import AsyncClient, ASGITransport

from adlaunch.datastore import DatastoreError, DatastoreErrorKind, DatastoreResult


class FakeDatastore:
    """Implements the SupabaseREST surface used by the routers, backed by dicts."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {"apps": [], "campaigns": []}
        self.failing: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str]] = []

    def fail(self, method: str, table: str):
        self.failing.add((method, table))

    def _error(self, method: str, table: str):
        if (method, table) in self.failing:
            return DatastoreResult(
                error=DatastoreError(kind=DatastoreErrorKind.HTTP, message="boom", status_code=500),
            )
        return None

    @staticmethod
    def _matches(row: dict, filter) -> bool:
        return all(str(row.get(k)) == str(v) for k, v in (filter or {}).items())

    async def select(self, table, columns="*", filter=None):
        self.calls.append(("select", table))
        err = self._error("select", table)
        if err:
            return err
        rows = [copy.deepcopy(r) for r in self.tables.setdefault(table, []) if self._matches(r, filter)]
        return DatastoreResult(data=rows)

    async def insert(self, table, record):
        self.calls.append(("insert", table))
        err = self._error("insert", table)
        if err:
            return err
        self.tables.setdefault(table, []).append(copy.deepcopy(record))
        return DatastoreResult(data=[copy.deepcopy(record)])

    async def update(self, table, record, filter):
        self.calls.append(("update", table))
        err = self._error("update", table)
        if err:
            return err
        updated = []
        for row in self.tables.setdefault(table, []):
            if self._matches(row, filter):
                row.update(record)
                updated.append(copy.deepcopy(row))
        return DatastoreResult(data=updated)

    async def check_connection(self):
        return True


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def datastore():
    return FakeDatastore()


@pytest.fixture
async def client(anyio_backend, datastore):
    from adlaunch.main import app
    from adlaunch.dependencies import get_datastore

    app.dependency_overrides[get_datastore] = lambda: datastore
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(datastore):
    """One Android app with one draft campaign."""
    datastore.tables["apps"].append({
        "id": "app-1",
        "name": "Puzzle Quest",
        "package_name": "com.example.puzzle",
        "platform": "android",
        "category": "games",
        "description": "",
        "app_store_url": None,
        "google_play_url": "https://play.google.com/store/apps/details?id=com.example.puzzle",
        "status": "pending",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    })
    datastore.tables["campaigns"].append({
        "id": "camp-1",
        "app_id": "app-1",
        "name": "Launch KR",
        "budget": 500000,
        "target_countries": ["KR"],
        "target_languages": ["ko"],
        "start_date": "2024-02-01",
        "end_date": None,
        "status": "draft",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    })
    return datastore
