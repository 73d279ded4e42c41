from devevents.db.record import Record
from devevents.domain.schemas.booking import BookingOut
from devevents.domain.schemas.event import EventOut


def record_to_event_out(record: Record) -> EventOut:
    return EventOut(id=str(record.id), **record.data)


def record_to_booking_out(record: Record) -> BookingOut:
    return BookingOut(
        id=str(record.id),
        eventId=str(record["eventId"]),
        email=record["email"],
        createdAt=record["createdAt"],
        updatedAt=record["updatedAt"],
    )
