from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, UUID4, field_validator
from uuid import UUID

from app.schemas.hall import Seat
from app.schemas.movie import Movie
from app.schemas.user import User


# Show: Create (POST /shows)
class ShowCreate(BaseModel):
    date: datetime
    movie_id: UUID
    seat_id: UUID
    user_id: UUID

    @field_validator("date")
    @classmethod
    def to_utc(cls, v: datetime) -> datetime:
        # Stored as UTC; naive input is already taken to be UTC
        if v.tzinfo is None:
            return v
        return v.astimezone(timezone.utc)


class Show(BaseModel):
    id: UUID4
    date: datetime
    movie_id: UUID4
    seat_id: UUID4
    user_id: UUID4
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Listing view (GET /shows)
class ShowWithRelations(Show):
    movie: Movie
    seat: Seat
    user: User
