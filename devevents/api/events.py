from fastapi import APIRouter, Depends, HTTPException, status

from devevents.db.session import Collections, get_collections
from devevents.domain.schemas.booking import EventBookings
from devevents.domain.schemas.event import EventCreate, EventOut, EventUpdate
from devevents.services import bookings, events
from devevents.services.mapper import record_to_booking_out, record_to_event_out

router = APIRouter(prefix="/events", tags=["events"])


def _not_found(slug: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Event {slug} not found")


@router.post("", response_model=EventOut, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: EventCreate, collections: Collections = Depends(get_collections)
) -> EventOut:
    record = await events.create_event(collections, payload)
    return record_to_event_out(record)


@router.get("", response_model=list[EventOut])
async def list_events(collections: Collections = Depends(get_collections)) -> list[EventOut]:
    return [record_to_event_out(record) for record in await events.list_events(collections)]


@router.get("/{slug}", response_model=EventOut)
async def get_event(slug: str, collections: Collections = Depends(get_collections)) -> EventOut:
    record = await events.get_event(collections, slug)
    if record is None:
        raise _not_found(slug)
    return record_to_event_out(record)


@router.patch("/{slug}", response_model=EventOut)
async def update_event(
    slug: str, payload: EventUpdate, collections: Collections = Depends(get_collections)
) -> EventOut:
    record = await events.update_event(collections, slug, payload)
    if record is None:
        raise _not_found(slug)
    return record_to_event_out(record)


@router.get("/{slug}/similar", response_model=list[EventOut])
async def similar_events(
    slug: str, collections: Collections = Depends(get_collections)
) -> list[EventOut]:
    records = await events.list_similar_events(collections, slug)
    return [record_to_event_out(record) for record in records]


@router.get("/{slug}/bookings", response_model=EventBookings)
async def event_bookings(
    slug: str, collections: Collections = Depends(get_collections)
) -> EventBookings:
    record = await events.get_event(collections, slug)
    if record is None:
        raise _not_found(slug)
    found = await bookings.list_bookings(collections, record.id)
    return EventBookings(
        count=await bookings.count_bookings(collections, record.id),
        bookings=[record_to_booking_out(booking) for booking in found],
    )
