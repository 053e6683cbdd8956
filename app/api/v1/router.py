
from fastapi import APIRouter

# Auth
from app.api.v1.public.auth import router as auth_router

# Public: catalogue
from app.api.v1.public.movies import (
    router as public_movies_router,
    director_router as public_directors_router,
    genre_router as public_genres_router,
)
from app.api.v1.public.halls import router as public_halls_router

# Public: shows & bookings
from app.api.v1.public.shows import router as shows_router
from app.api.v1.public.bookings import router as bookings_router

# Admin
from app.api.v1.admin.movies import (
    router as movies_router,
    director_router,
    genre_router,
)
from app.api.v1.admin.halls import router as halls_router

api_router = APIRouter()

# --- Auth ---
api_router.include_router(auth_router)

# --- Public: catalogue ---
api_router.include_router(public_movies_router)
api_router.include_router(public_directors_router)
api_router.include_router(public_genres_router)
api_router.include_router(public_halls_router)

# --- Public: shows & bookings ---
api_router.include_router(shows_router)
api_router.include_router(bookings_router)

# --- Admin ---
api_router.include_router(movies_router)
api_router.include_router(director_router)
api_router.include_router(genre_router)
api_router.include_router(halls_router)
