import asyncio

import pytest
from bson import ObjectId

from devevents.core.errors import MissingReferenceError, ValidationError
from devevents.domain.schemas.booking import BookingCreate
from devevents.domain.schemas.event import EventCreate, EventUpdate
from devevents.services import bookings, events


def _create(collections, data) -> object:
    return asyncio.run(events.create_event(collections, EventCreate(**data)))


def test_create_event_trims_and_normalizes(collections, event_data) -> None:
    record = _create(collections, event_data(title="  Data Day  ", time="7:00 PM"))

    assert record["title"] == "Data Day"
    assert record["slug"] == "data-day"
    assert record["time"] == "19:00"


def test_update_event_only_touches_given_fields(collections, event_data) -> None:
    created = _create(collections, event_data(date="May 20, 2024"))

    updated = asyncio.run(
        events.update_event(collections, created["slug"], EventUpdate(description="New text"))
    )

    assert updated["description"] == "New text"
    assert updated["slug"] == created["slug"]
    assert updated["date"] == "2024-05-20"
    assert updated["time"] == "18:30"


def test_update_event_with_new_title_moves_slug(collections, event_data) -> None:
    _create(collections, event_data())

    updated = asyncio.run(
        events.update_event(collections, "pycon-community-meetup", EventUpdate(title="PyData Night"))
    )

    assert updated["slug"] == "pydata-night"
    assert asyncio.run(events.get_event(collections, "pycon-community-meetup")) is None


def test_update_unknown_event_returns_none(collections) -> None:
    assert asyncio.run(events.update_event(collections, "nope", EventUpdate(title="X"))) is None


def test_list_events_newest_first(collections, event_data) -> None:
    _create(collections, event_data(title="First"))
    _create(collections, event_data(title="Second"))

    slugs = [record["slug"] for record in asyncio.run(events.list_events(collections))]

    assert sorted(slugs) == ["first", "second"]
    assert len(slugs) == 2


def test_similar_events_share_a_tag(collections, event_data) -> None:
    _create(collections, event_data(title="Main", tags=["python", "web"]))
    _create(collections, event_data(title="Web Night", tags=["web"]))
    _create(collections, event_data(title="Rust Night", tags=["rust"]))

    similar = asyncio.run(events.list_similar_events(collections, "main"))

    assert [record["slug"] for record in similar] == ["web-night"]


def test_similar_events_for_unknown_slug(collections) -> None:
    assert asyncio.run(events.list_similar_events(collections, "missing")) == []


def test_create_booking_and_count(collections, event_data) -> None:
    event = _create(collections, event_data())
    payload = BookingCreate(eventId=str(event.id), email=" Grace@Example.com ")

    booking = asyncio.run(bookings.create_booking(collections, payload))

    assert booking["email"] == "grace@example.com"
    assert booking["eventId"] == event.id
    assert asyncio.run(bookings.count_bookings(collections, event.id)) == 1
    listed = asyncio.run(bookings.list_bookings(collections, event.id))
    assert [record.id for record in listed] == [booking.id]


def test_create_booking_for_missing_event(collections) -> None:
    payload = BookingCreate(eventId=str(ObjectId()), email="grace@example.com")

    with pytest.raises(MissingReferenceError):
        asyncio.run(bookings.create_booking(collections, payload))


def test_parse_object_id_rejects_garbage() -> None:
    with pytest.raises(ValidationError, match="Invalid event ID: abc"):
        bookings.parse_object_id("abc")


def test_booking_schema_rejects_bad_email() -> None:
    with pytest.raises(ValueError):
        BookingCreate(eventId=str(ObjectId()), email="not-an-email")


def test_event_schema_rejects_empty_agenda(event_data) -> None:
    with pytest.raises(ValueError):
        EventCreate(**event_data(agenda=[]))
