from __future__ import annotations

import logging

from devevents.core.datetimes import normalize_date, normalize_time
from devevents.core.errors import ValidationError
from devevents.core.slugs import generate_slug, suffixed_slug
from devevents.db.collection import DocumentCollection, PreSaveHook
from devevents.db.record import Record

logger = logging.getLogger(__name__)

EVENTS_COLLECTION = "events"

EVENT_MODES = ("online", "offline", "hybrid")

TRIMMED_FIELDS = (
    "title",
    "description",
    "overview",
    "venue",
    "location",
    "audience",
    "organizer",
)

REQUIRED_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)


async def trim_text_fields(record: Record, collection: DocumentCollection) -> None:
    for field in TRIMMED_FIELDS:
        value = record.get(field)
        if isinstance(value, str):
            record[field] = value.strip()


async def validate_event_shape(record: Record, collection: DocumentCollection) -> None:
    mode = record.get("mode")
    if mode not in EVENT_MODES:
        raise ValidationError("mode", mode, f"mode must be one of {', '.join(EVENT_MODES)}: {mode}")

    for field, label in (("agenda", "Agenda"), ("tags", "Tags")):
        items = record.get(field)
        if not isinstance(items, list) or not items:
            raise ValidationError(field, items, f"{label} must have at least one item")
        if not all(isinstance(item, str) for item in items):
            raise ValidationError(field, items, f"{label} must only contain strings")


async def assign_slug(record: Record, collection: DocumentCollection) -> None:
    if not record.needs("title"):
        return

    title = record.get("title")
    base = generate_slug(title) if isinstance(title, str) else ""
    if not base:
        raise ValidationError("title", title, f"title cannot be turned into a slug: {title!r}")

    counter = 0
    slug = base
    while await collection.exists({"slug": slug, "_id": {"$ne": record.id}}):
        logger.debug("Slug taken slug=%s id=%s", slug, record.id)
        counter += 1
        slug = suffixed_slug(base, counter)
    record["slug"] = slug


async def normalize_event_date(record: Record, collection: DocumentCollection) -> None:
    if record.needs("date"):
        record["date"] = normalize_date(record.get("date"))


async def normalize_event_time(record: Record, collection: DocumentCollection) -> None:
    if record.needs("time"):
        record["time"] = normalize_time(record.get("time"))


async def check_required_fields(record: Record, collection: DocumentCollection) -> None:
    for field in REQUIRED_FIELDS:
        value = record.get(field)
        if not isinstance(value, str) or value.strip() == "":
            raise ValidationError(field, value, f"{field} cannot be empty")


def event_hooks() -> list[PreSaveHook]:
    return [
        trim_text_fields,
        validate_event_shape,
        assign_slug,
        normalize_event_date,
        normalize_event_time,
        check_required_fields,
    ]
