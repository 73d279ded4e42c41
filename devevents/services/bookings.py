from __future__ import annotations

import logging

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING

from devevents.core.errors import ValidationError
from devevents.db.record import Record
from devevents.db.session import Collections
from devevents.domain.schemas.booking import BookingCreate

logger = logging.getLogger(__name__)


def parse_object_id(value: str, field: str = "eventId") -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValidationError(field, value, f"Invalid event ID: {value}") from None


async def create_booking(collections: Collections, payload: BookingCreate) -> Record:
    record = Record({"eventId": parse_object_id(payload.eventId), "email": payload.email})
    await collections.bookings.save(record)
    logger.info("Created booking id=%s event_id=%s", record.id, record["eventId"])
    return record


async def list_bookings(collections: Collections, event_id: ObjectId) -> list[Record]:
    return await collections.bookings.find({"eventId": event_id}, sort=[("createdAt", ASCENDING)])


async def count_bookings(collections: Collections, event_id: ObjectId) -> int:
    return await collections.bookings.count({"eventId": event_id})
