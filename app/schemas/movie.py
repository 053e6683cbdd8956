from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, Field, UUID4
from datetime import date, datetime


# Director
class DirectorBase(BaseModel):
    first_name: str
    last_name: str
    date_of_birth: date
    thumbnail: str


class DirectorCreate(DirectorBase):
    pass


class Director(DirectorBase):
    id: UUID4
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Genre
class GenreCreate(BaseModel):
    name: str


class Genre(GenreCreate):
    id: UUID4

    class Config:
        from_attributes = True


# Movie
class MovieBase(BaseModel):
    title: str
    description: str
    release_date: datetime
    minimum_age: int = Field(ge=0)
    thumbnail: str


class MovieCreate(MovieBase):
    director_id: UUID
    genre_ids: List[UUID] = []


class Movie(MovieBase):
    id: UUID4
    director_id: UUID4
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Movie page: director and genres embedded
class MovieDetail(Movie):
    director: Director
    genres: List[Genre]
