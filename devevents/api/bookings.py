from fastapi import APIRouter, Depends, status

from devevents.db.session import Collections, get_collections
from devevents.domain.schemas.booking import BookingCreate, BookingOut
from devevents.services import bookings
from devevents.services.mapper import record_to_booking_out

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreate, collections: Collections = Depends(get_collections)
) -> BookingOut:
    record = await bookings.create_booking(collections, payload)
    return record_to_booking_out(record)
