from __future__ import annotations

import logging

from pymongo import DESCENDING

from devevents.db.record import Record
from devevents.db.session import Collections
from devevents.domain.schemas.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)


async def create_event(collections: Collections, payload: EventCreate) -> Record:
    record = Record(payload.model_dump())
    await collections.events.save(record)
    logger.info("Created event slug=%s id=%s", record["slug"], record.id)
    return record


async def get_event(collections: Collections, slug: str) -> Record | None:
    return await collections.events.find_one({"slug": slug})


async def list_events(collections: Collections, limit: int = 0) -> list[Record]:
    return await collections.events.find(sort=[("createdAt", DESCENDING)], limit=limit)


async def update_event(collections: Collections, slug: str, payload: EventUpdate) -> Record | None:
    record = await get_event(collections, slug)
    if record is None:
        return None

    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    record.update(changes)
    await collections.events.save(record)
    logger.info(
        "Updated event slug=%s id=%s fields=%s",
        record["slug"],
        record.id,
        ",".join(sorted(changes)),
    )
    return record


async def list_similar_events(collections: Collections, slug: str, limit: int = 3) -> list[Record]:
    record = await get_event(collections, slug)
    if record is None:
        return []
    return await collections.events.find(
        {"_id": {"$ne": record.id}, "tags": {"$in": list(record.get("tags") or [])}},
        sort=[("createdAt", DESCENDING)],
        limit=limit,
    )
