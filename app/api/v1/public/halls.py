from uuid import UUID
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.hall import Hall
from app.models.seat import Seat
from app.schemas.hall import Hall as HallSchema, Seat as SeatSchema

router = APIRouter(prefix="/halls", tags=["Halls"])


@router.get("", response_model=List[HallSchema])
def list_halls(db: Session = Depends(get_db)):
    return db.query(Hall).order_by(Hall.name).all()


@router.get("/{hall_id}/seats", response_model=List[SeatSchema])
def list_seats(hall_id: UUID, db: Session = Depends(get_db)):
    hall = db.query(Hall).filter(Hall.id == hall_id).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")

    return (
        db.query(Seat)
        .filter(Seat.hall_id == hall_id)
        .order_by(Seat.number)
        .all()
    )
