from typing import Optional
from uuid import UUID
from pydantic import BaseModel, UUID4
from datetime import datetime

from app.schemas.show import Show


# Booking: Create (POST /bookings); the caller is the owner
class BookingCreate(BaseModel):
    seat_id: UUID
    show_id: UUID


class Booking(BaseModel):
    id: UUID4
    user_id: UUID4
    seat_id: UUID4
    show_id: UUID4
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BookingWithShow(Booking):
    show: Show
