from app.models.user import User, AuthenticationToken
from app.models.movie import Director, Genre, Movie, MovieGenre
from app.models.hall import Hall
from app.models.seat import Seat
from app.models.show import Show
from app.models.booking import Booking
