from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.security import get_password_hash
from app.db.base import ALL_MODELS
from app.db.schema_builder import SchemaBuilder
from app.db.session import Database
from app.main import create_app
from app.models.user import User
from app.models.movie import Director, Genre, Movie
from app.models.hall import Hall
from app.models.seat import Seat
from app.utils.auth_tokens import assign_new_auth_token

ADMIN_SECRET = "test-admin-secret"
PASSWORD = "Secret123!"


def as_utc(value: datetime) -> datetime:
    """SQLite drops the offset; stored values are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def make_user(db, email="viewer@example.com", is_administrator=False) -> User:
    user = User(
        first_name="Ada",
        last_name="Viewer",
        email=email,
        password=get_password_hash(PASSWORD),
        date_of_birth=datetime(1990, 5, 17),
        is_administrator=is_administrator,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_catalogue(db) -> dict:
    """One director, genre, movie, hall, seat and user, committed."""
    director = Director(
        first_name="Steven",
        last_name="Spielberg",
        date_of_birth=date(1946, 12, 18),
        thumbnail="spielberg.jpg",
    )
    genre = Genre(name="Drama")
    movie = Movie(
        title="Schindler's List",
        description="A businessman saves a thousand lives.",
        release_date=datetime(1993, 12, 15),
        minimum_age=12,
        thumbnail="schindler.jpg",
        director=director,
        genres=[genre],
    )
    hall = Hall(name="Hall 1")
    seat = Seat(number=7, hall=hall)
    db.add_all([director, genre, movie, hall, seat])
    db.commit()
    user = make_user(db)
    return {
        "director_id": director.id,
        "genre_id": genre.id,
        "movie_id": movie.id,
        "hall_id": hall.id,
        "seat_id": seat.id,
        "user_id": user.id,
    }


def auth_headers(db, user: User) -> dict:
    token = assign_new_auth_token(db, user)
    return {"Authorization": f"Bearer {token.id}"}


# ---------------------------------------------------------------------------
# Store-level fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'models.db'}")
    result = SchemaBuilder(database.engine, ALL_MODELS).build(force=True)
    assert result.ok, result.error
    yield database
    database.dispose()


@pytest.fixture()
def db(database):
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def app_settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'api.db'}",
        FORCE_SYNC_SCHEMA=True,
        CREATE_DATABASE=False,
        ADMIN_SECRET_KEY=ADMIN_SECRET,
    )


@pytest.fixture()
def client(app_settings):
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def client_db(client):
    session = client.app.state.database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def admin_headers(client_db):
    admin = make_user(client_db, email="admin@example.com", is_administrator=True)
    return auth_headers(client_db, admin)


@pytest.fixture()
def api_prefix(app_settings):
    return app_settings.API_V1_STR
