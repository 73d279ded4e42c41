from datetime import datetime

from pydantic import BaseModel, field_validator

from devevents.db.models.booking import is_valid_email


class BookingCreate(BaseModel):
    eventId: str
    email: str

    @field_validator("email")
    @classmethod
    def _canonical_email(cls, value: str) -> str:
        email = value.strip().lower()
        if not is_valid_email(email):
            raise ValueError("Invalid email format")
        return email


class BookingOut(BaseModel):
    id: str
    eventId: str
    email: str
    createdAt: datetime
    updatedAt: datetime


class EventBookings(BaseModel):
    count: int
    bookings: list[BookingOut]
