import asyncio
import copy
from types import SimpleNamespace
from typing import Any

import pytest
from pymongo.errors import DuplicateKeyError

from devevents.db.session import build_collections


def _matches(document: dict[str, Any], filter: dict[str, Any]) -> bool:
    for key, condition in filter.items():
        value = document.get(key)
        if isinstance(condition, dict):
            for op, operand in condition.items():
                if op == "$ne":
                    if value == operand:
                        return False
                elif op == "$in":
                    values = value if isinstance(value, list) else [value]
                    if not any(item in operand for item in values):
                        return False
                else:
                    raise NotImplementedError(op)
        elif isinstance(value, list):
            if condition not in value:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents

    async def to_list(self, length=None) -> list[dict[str, Any]]:
        return [copy.deepcopy(document) for document in self._documents]


class FakeCollection:
    def __init__(self, unique_fields: tuple[str, ...] = ()) -> None:
        self.documents: list[dict[str, Any]] = []
        self.unique_fields = unique_fields
        self.queries: list[dict[str, Any]] = []
        self.writes = 0
        self.indexes: list[tuple[list, bool]] = []
        # hand control back to the loop after each read, like a network round-trip
        self.yield_after_read = False

    async def find_one(self, filter, projection=None):
        self.queries.append(dict(filter))
        found = next((document for document in self.documents if _matches(document, filter)), None)
        if self.yield_after_read:
            await asyncio.sleep(0)
        return copy.deepcopy(found)

    def find(self, filter, sort=None, limit=0):
        found = [document for document in self.documents if _matches(document, filter)]
        for key, direction in reversed(sort or []):
            found.sort(key=lambda document: document.get(key), reverse=direction < 0)
        if limit:
            found = found[:limit]
        return FakeCursor(found)

    async def count_documents(self, filter) -> int:
        return sum(1 for document in self.documents if _matches(document, filter))

    async def insert_one(self, document):
        self._check_unique(document)
        self.writes += 1
        self.documents.append(copy.deepcopy(document))

    async def replace_one(self, filter, replacement):
        self._check_unique(replacement)
        self.writes += 1
        for index, document in enumerate(self.documents):
            if _matches(document, filter):
                self.documents[index] = copy.deepcopy(replacement)
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def create_index(self, keys, unique: bool = False) -> str:
        self.indexes.append((keys, unique))
        return "_".join(f"{field}_{direction}" for field, direction in keys)

    def _check_unique(self, document) -> None:
        for field in self.unique_fields:
            for existing in self.documents:
                if existing["_id"] != document["_id"] and existing.get(field) == document.get(field):
                    raise DuplicateKeyError(
                        f"E11000 duplicate key error dup key: {{ {field}: {document.get(field)!r} }}"
                    )


class FakeDatabase:
    name = "devevents-test"

    def __init__(self) -> None:
        self._collections = {
            "events": FakeCollection(unique_fields=("slug",)),
            "bookings": FakeCollection(),
        }

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection())


def make_event_data(**overrides: Any) -> dict[str, Any]:
    data = {
        "title": "PyCon Community Meetup",
        "description": "An evening of talks for Python developers.",
        "overview": "Lightning talks and networking.",
        "image": "/images/event1.png",
        "venue": "Tech Hub",
        "location": "Berlin, Germany",
        "date": "2024-05-20",
        "time": "6:30 PM",
        "mode": "offline",
        "audience": "Developers",
        "agenda": ["Welcome", "Talks", "Networking"],
        "organizer": "Python Berlin",
        "tags": ["python", "community"],
    }
    data.update(overrides)
    return data


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def collections(database):
    return build_collections(database)


@pytest.fixture
def event_data():
    return make_event_data
