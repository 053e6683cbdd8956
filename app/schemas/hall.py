from typing import Optional
from pydantic import BaseModel, UUID4
from datetime import datetime


# Hall Schemas
class HallCreate(BaseModel):
    name: str


class Hall(HallCreate):
    id: UUID4
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Seat Schemas
class SeatCreate(BaseModel):
    number: int


class Seat(SeatCreate):
    id: UUID4
    hall_id: UUID4
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
