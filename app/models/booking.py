import uuid
from sqlalchemy import Column, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base, TimestampMixin

class Booking(TimestampMixin, Base):
    __tablename__ = "bookings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    seat_id = Column(Uuid, ForeignKey("seats.id"), nullable=False, index=True)
    show_id = Column(Uuid, ForeignKey("shows.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User")
    seat = relationship("Seat")
    show = relationship("Show", back_populates="bookings")
