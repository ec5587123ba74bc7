from __future__ import annotations

import asyncio
import re
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from foodlovers.app import create_app
from foodlovers.storage.client import Storage, _ensure_indexes, get_storage


# ── In-memory stand-in for the collection calls the repositories make ───


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    for key, cond in query.items():
        value = doc.get(key)
        if isinstance(cond, dict) and "$regex" in cond:
            flags = re.IGNORECASE if "i" in cond.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(cond["$regex"], value, flags):
                return False
        elif value != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]):
        self._docs = docs
        self._limit = 0

    def sort(self, key: str, direction: int = 1) -> FakeCursor:
        present = [d for d in self._docs if d.get(key) is not None]
        missing = [d for d in self._docs if d.get(key) is None]
        present.sort(key=lambda d: d[key], reverse=direction < 0)
        # Missing values sort lowest, as on the server
        self._docs = missing + present if direction > 0 else present + missing
        return self

    def limit(self, n: int) -> FakeCursor:
        self._limit = n
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        docs = self._docs[: self._limit] if self._limit else self._docs
        return [dict(d) for d in docs]


class FakeCollection:
    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []
        self.indexes: list[dict[str, Any]] = []

    def find(self, query: dict[str, Any] | None = None) -> FakeCursor:
        return FakeCursor([d for d in self.docs if _matches(d, query or {})])

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for d in self.docs:
            if _matches(d, query):
                return dict(d)
        return None

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        doc.setdefault("_id", ObjectId())
        for index in self.indexes:
            if not index["unique"]:
                continue
            keys = [k for k, _ in index["keys"]]
            if any(all(d.get(k) == doc.get(k) for k in keys) for d in self.docs):
                raise DuplicateKeyError("E11000 duplicate key error", 11000)
        self.docs.append(dict(doc))
        return SimpleNamespace(acknowledged=True, inserted_id=doc["_id"])

    async def update_one(self, query: dict[str, Any], update: dict[str, Any]) -> SimpleNamespace:
        for d in self.docs:
            if _matches(d, query):
                d.update(update["$set"])
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        for i, d in enumerate(self.docs):
            if _matches(d, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def create_index(self, keys: list[tuple[str, Any]], unique: bool = False, **kwargs: Any) -> str:
        self.indexes.append({"keys": keys, "unique": unique, **kwargs})
        return kwargs.get("name", "_".join(k for k, _ in keys))


class FakeDatabase:
    def __init__(self) -> None:
        self._collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection())

    async def command(self, name: str) -> dict[str, Any]:
        return {"ok": 1.0}


# ── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
def storage() -> Storage:
    db = FakeDatabase()
    store = Storage(client=MagicMock(), db=db, reviews=db["reviews"], favorites=db["favorites"])
    asyncio.run(_ensure_indexes(store))
    return store


@pytest.fixture
def app(storage):
    application = create_app()
    application.dependency_overrides[get_storage] = lambda: storage
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def taco() -> dict[str, Any]:
    return {
        "foodName": "Taco",
        "foodImage": "x.png",
        "restaurantName": "Joe's",
        "rating": 4,
        "userEmail": "a@b.com",
    }
