import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.models.booking import Booking
from app.models.seat import Seat
from app.models.show import Show
from app.schemas.booking import BookingCreate, Booking as BookingSchema, BookingWithShow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.get("", response_model=List[BookingWithShow])
def list_my_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return (
        db.query(Booking)
        .options(joinedload(Booking.show))
        .filter(Booking.user_id == current_user.id)
        .all()
    )


@router.post("", response_model=BookingSchema, status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # Nothing prevents two bookings of the same seat for the same show
    if not db.query(Show.id).filter(Show.id == data.show_id).first():
        raise HTTPException(status_code=404, detail="Show not found")
    if not db.query(Seat.id).filter(Seat.id == data.seat_id).first():
        raise HTTPException(status_code=404, detail="Seat not found")

    booking = Booking(user_id=current_user.id, seat_id=data.seat_id, show_id=data.show_id)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info("User %s booked seat %s for show %s", current_user.id, data.seat_id, data.show_id)
    return booking
