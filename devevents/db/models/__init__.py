from devevents.db.models.booking import BOOKINGS_COLLECTION, booking_hooks
from devevents.db.models.event import EVENTS_COLLECTION, event_hooks

__all__ = [
    "BOOKINGS_COLLECTION",
    "EVENTS_COLLECTION",
    "booking_hooks",
    "event_hooks",
]
