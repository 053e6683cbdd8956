import logging
from uuid import UUID
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.models.show import Show
from app.schemas.show import ShowCreate, Show as ShowSchema, ShowWithRelations

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shows", tags=["Shows"])


@router.get("", response_model=List[ShowWithRelations])
def list_shows(db: Session = Depends(get_db)):
    """Every show with its movie, user and seat. No paging, store order."""
    return (
        db.query(Show)
        .options(joinedload(Show.movie), joinedload(Show.user), joinedload(Show.seat))
        .all()
    )


@router.post(
    "",
    response_model=ShowSchema,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": ShowCreate.model_json_schema()}}}},
)
def create_show(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Insert a show. Any failure, invalid payload included, is a bare 500."""
    try:
        data = ShowCreate.model_validate(payload)
        show = Show(**data.model_dump())
        db.add(show)
        db.commit()
    except (ValidationError, SQLAlchemyError) as e:
        db.rollback()
        logger.error(f"Error creating show: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    db.refresh(show)
    return show


@router.get("/{show_id}", response_model=ShowWithRelations)
def get_show(show_id: UUID, db: Session = Depends(get_db)):
    show = (
        db.query(Show)
        .options(joinedload(Show.movie), joinedload(Show.user), joinedload(Show.seat))
        .filter(Show.id == show_id)
        .first()
    )
    if not show:
        raise HTTPException(status_code=404, detail="Show not found")
    return show
