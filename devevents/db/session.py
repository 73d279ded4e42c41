from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymongo import ASCENDING

from devevents.database.mongo import get_database
from devevents.db.collection import DocumentCollection
from devevents.db.models import (
    BOOKINGS_COLLECTION,
    EVENTS_COLLECTION,
    booking_hooks,
    event_hooks,
)


@dataclass
class Collections:
    events: DocumentCollection
    bookings: DocumentCollection


def build_collections(database: Any) -> Collections:
    events = DocumentCollection(database[EVENTS_COLLECTION], EVENTS_COLLECTION, event_hooks())
    bookings = DocumentCollection(
        database[BOOKINGS_COLLECTION],
        BOOKINGS_COLLECTION,
        booking_hooks(events),
    )
    return Collections(events=events, bookings=bookings)


async def get_collections() -> Collections:
    database = await get_database()
    return build_collections(database)


async def ensure_indexes(database: Any) -> list[str]:
    created = [
        await database[EVENTS_COLLECTION].create_index([("slug", ASCENDING)], unique=True),
        await database[BOOKINGS_COLLECTION].create_index([("eventId", ASCENDING)]),
    ]
    return created
