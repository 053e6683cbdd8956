import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base, TimestampMixin

class Show(TimestampMixin, Base):
    __tablename__ = "shows"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    movie_id = Column(Uuid, ForeignKey("movies.id"), nullable=False, index=True)
    seat_id = Column(Uuid, ForeignKey("seats.id"), nullable=False, index=True)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    movie = relationship("Movie", back_populates="shows")
    seat = relationship("Seat")
    user = relationship("User")
    bookings = relationship("Booking", back_populates="show", passive_deletes="all")
