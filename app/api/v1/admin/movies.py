from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.movie import Director, Genre, Movie
from app.schemas.movie import (
    DirectorCreate,
    Director as DirectorSchema,
    GenreCreate,
    Genre as GenreSchema,
    MovieCreate,
    MovieDetail,
)

router = APIRouter(prefix="/admin/movies", tags=["Admin - Movies"])
director_router = APIRouter(prefix="/admin/directors", tags=["Admin - Directors"])
genre_router = APIRouter(prefix="/admin/genres", tags=["Admin - Genres"])


# ---------------------------------------------------------------------------
# Directors & genres
# ---------------------------------------------------------------------------


@director_router.post("", response_model=DirectorSchema, status_code=status.HTTP_201_CREATED)
def create_director(
    data: DirectorCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    director = Director(**data.model_dump())
    db.add(director)
    db.commit()
    db.refresh(director)
    return director


@genre_router.post("", response_model=GenreSchema, status_code=status.HTTP_201_CREATED)
def create_genre(
    data: GenreCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    if db.query(Genre.id).filter(Genre.name == data.name).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Genre already exists")
    genre = Genre(name=data.name)
    db.add(genre)
    db.commit()
    db.refresh(genre)
    return genre


# ---------------------------------------------------------------------------
# Movies
# ---------------------------------------------------------------------------


@router.post("", response_model=MovieDetail, status_code=status.HTTP_201_CREATED)
def create_movie(
    data: MovieCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    director = db.query(Director).filter(Director.id == data.director_id).first()
    if not director:
        raise HTTPException(status_code=404, detail="Director not found")

    genre_ids = set(data.genre_ids)
    genres = db.query(Genre).filter(Genre.id.in_(genre_ids)).all() if genre_ids else []
    if len(genres) != len(genre_ids):
        raise HTTPException(status_code=404, detail="Genre not found")

    movie = Movie(**data.model_dump(exclude={"genre_ids"}))
    movie.genres = genres
    db.add(movie)
    db.commit()
    db.refresh(movie)
    return movie


@router.delete("/{movie_id}", status_code=status.HTTP_200_OK)
def delete_movie(
    movie_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    movie = db.query(Movie).filter(Movie.id == movie_id).first()
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")

    # moviegenres rows cascade-delete in the database
    db.delete(movie)
    db.commit()
    return {"id": str(movie_id), "deleted": True}
