from uuid import UUID
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload

from app.db.session import get_db
from app.models.movie import Director, Genre, Movie
from app.schemas.movie import (
    Director as DirectorSchema,
    Genre as GenreSchema,
    Movie as MovieSchema,
    MovieDetail,
)

router = APIRouter(prefix="/movies", tags=["Movies"])
director_router = APIRouter(prefix="/directors", tags=["Directors"])
genre_router = APIRouter(prefix="/genres", tags=["Genres"])


@router.get("", response_model=List[MovieSchema])
def list_movies(db: Session = Depends(get_db)):
    return db.query(Movie).order_by(Movie.release_date.desc()).all()


@router.get("/{movie_id}", response_model=MovieDetail)
def get_movie(movie_id: UUID, db: Session = Depends(get_db)):
    movie = (
        db.query(Movie)
        .options(selectinload(Movie.director), selectinload(Movie.genres))
        .filter(Movie.id == movie_id)
        .first()
    )
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@director_router.get("", response_model=List[DirectorSchema])
def list_directors(db: Session = Depends(get_db)):
    return db.query(Director).order_by(Director.last_name, Director.first_name).all()


@director_router.get("/{director_id}", response_model=DirectorSchema)
def get_director(director_id: UUID, db: Session = Depends(get_db)):
    director = db.query(Director).filter(Director.id == director_id).first()
    if not director:
        raise HTTPException(status_code=404, detail="Director not found")
    return director


@genre_router.get("", response_model=List[GenreSchema])
def list_genres(db: Session = Depends(get_db)):
    return db.query(Genre).order_by(Genre.name).all()
