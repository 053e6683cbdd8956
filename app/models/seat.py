import uuid
from sqlalchemy import Column, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base, TimestampMixin

class Seat(TimestampMixin, Base):
    __tablename__ = "seats"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    hall_id = Column(Uuid, ForeignKey("halls.id"), nullable=False, index=True)
    number = Column(Integer, nullable=False)

    hall = relationship("Hall", back_populates="seats")
