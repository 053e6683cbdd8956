from app.schemas.user import User, UserCreate, AdminCreate, Token, TokenRefresh
from app.schemas.movie import (
    Director, DirectorCreate,
    Genre, GenreCreate,
    Movie, MovieCreate, MovieDetail,
)
from app.schemas.hall import Hall, HallCreate, Seat, SeatCreate
from app.schemas.show import Show, ShowCreate, ShowWithRelations
from app.schemas.booking import Booking, BookingCreate, BookingWithShow
