from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

import pytest

from factory_ops.container import build_container
from factory_ops.main import create_app
from factory_ops.records.schema import RecordSchema

TEST_DB = {"host": "localhost", "port": 3306, "user": "root", "password": "", "database": "factory_ops_test"}


class InMemoryCollectionStore:
    def __init__(self, schema: RecordSchema):
        self.schema = schema
        self._next_id = 1
        self._rows: dict[int, dict[str, Any]] = {}
        self.calls: list[str] = []

    def list_all(self) -> list[dict[str, Any]]:
        self.calls.append("list_all")
        return [dict(r) for _, r in sorted(self._rows.items())]

    def create(self, values: dict[str, Any]) -> dict[str, Any]:
        self.calls.append("create")
        rid = self._next_id
        self._next_id += 1
        self._rows[rid] = {"id": rid, **values}
        return dict(self._rows[rid])

    def update(self, record_id: int, payload: Any, prepare: Callable[[Any], dict[str, Any]]) -> Optional[dict[str, Any]]:
        self.calls.append("update")
        row = self._rows.get(int(record_id))
        if row is None:
            return None
        row.update(prepare(payload))
        return dict(row)

    def delete(self, record_id: int) -> Optional[dict[str, Any]]:
        self.calls.append("delete")
        return self._rows.pop(int(record_id), None)


class InMemorySessionStore:
    def __init__(self):
        self.data: Optional[dict] = None

    def load(self) -> Optional[dict]:
        return self.data

    def save(self, data: dict) -> None:
        self.data = dict(data)

    def clear(self) -> None:
        self.data = None


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def stores() -> dict[str, InMemoryCollectionStore]:
    return {}


@pytest.fixture
def container(stores):
    def store_factory(schema: RecordSchema) -> InMemoryCollectionStore:
        stores[schema.resource] = InMemoryCollectionStore(schema)
        return stores[schema.resource]

    return build_container(db_config=TEST_DB, store_factory=store_factory)


@pytest.fixture
def app(container):
    app = create_app(container=container, settings_module="config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()
