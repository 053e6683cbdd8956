import uuid
from sqlalchemy import Column, String, Date, DateTime, Integer, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base, TimestampMixin

class Director(TimestampMixin, Base):
    __tablename__ = "directors"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    thumbnail = Column(String(255), nullable=False)

    # Deleting a director that still has movies is refused by the store
    movies = relationship("Movie", back_populates="director", passive_deletes="all")

class Genre(TimestampMixin, Base):
    __tablename__ = "genres"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)

    movies = relationship("Movie", secondary="moviegenres", back_populates="genres", passive_deletes=True)

class Movie(TimestampMixin, Base):
    __tablename__ = "movies"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    director_id = Column(Uuid, ForeignKey("directors.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    release_date = Column(DateTime(timezone=True), nullable=False)
    minimum_age = Column(Integer, nullable=False)
    thumbnail = Column(String(255), nullable=False)

    # Relationships
    director = relationship("Director", back_populates="movies")
    genres = relationship("Genre", secondary="moviegenres", back_populates="movies", passive_deletes=True)
    shows = relationship("Show", back_populates="movie", passive_deletes="all")

class MovieGenre(TimestampMixin, Base):
    """Join rows between movies and genres; removed with either side."""
    __tablename__ = "moviegenres"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    movie_id = Column(Uuid, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False, index=True)
    genre_id = Column(Uuid, ForeignKey("genres.id", ondelete="CASCADE"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("movie_id", "genre_id", name="uq_moviegenres_movie_genre"),
    )
