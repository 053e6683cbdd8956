from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.hall import Hall
from app.models.seat import Seat
from app.schemas.hall import (
    HallCreate,
    Hall as HallSchema,
    SeatCreate,
    Seat as SeatSchema,
)

router = APIRouter(prefix="/admin/halls", tags=["Admin - Halls"])


@router.post("", response_model=HallSchema, status_code=status.HTTP_201_CREATED)
def create_hall(
    data: HallCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    if db.query(Hall.id).filter(Hall.name == data.name).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Hall already exists")
    hall = Hall(name=data.name)
    db.add(hall)
    db.commit()
    db.refresh(hall)
    return hall


@router.post(
    "/{hall_id}/seats",
    response_model=SeatSchema,
    status_code=status.HTTP_201_CREATED,
)
def create_seat(
    hall_id: UUID,
    data: SeatCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    hall = db.query(Hall).filter(Hall.id == hall_id).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")

    seat = Seat(hall_id=hall_id, number=data.number)
    db.add(seat)
    db.commit()
    db.refresh(seat)
    return seat
