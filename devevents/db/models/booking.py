from __future__ import annotations

import logging
import re

from bson import ObjectId

from devevents.core.errors import MissingReferenceError, ValidationError
from devevents.db.collection import DocumentCollection, PreSaveHook
from devevents.db.record import Record

logger = logging.getLogger(__name__)

BOOKINGS_COLLECTION = "bookings"

# local@domain.tld with no whitespace and a single @
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


async def canonicalize_email(record: Record, collection: DocumentCollection) -> None:
    email = record.get("email")
    if isinstance(email, str):
        record["email"] = email.strip().lower()


async def check_email_format(record: Record, collection: DocumentCollection) -> None:
    email = record.get("email")
    if not isinstance(email, str) or not email:
        raise ValidationError("email", email, "Email is required")
    if not is_valid_email(email):
        raise ValidationError("email", email, f"Invalid email format: {email}")


def make_event_exists_check(events: DocumentCollection) -> PreSaveHook:
    async def check_event_exists(record: Record, collection: DocumentCollection) -> None:
        event_id = record.get("eventId")
        if event_id is None:
            raise ValidationError("eventId", event_id, "Event ID is required")
        if not isinstance(event_id, ObjectId):
            raise ValidationError("eventId", event_id, f"Invalid event ID: {event_id}")
        if not await events.exists({"_id": event_id}):
            logger.info("Rejected booking for missing event id=%s", event_id)
            raise MissingReferenceError("Event", event_id)

    return check_event_exists


def booking_hooks(events: DocumentCollection) -> list[PreSaveHook]:
    return [
        canonicalize_email,
        check_email_format,
        make_event_exists_check(events),
    ]
