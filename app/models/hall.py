import uuid
from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base, TimestampMixin

class Hall(TimestampMixin, Base):
    __tablename__ = "halls"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)

    # Relationships
    seats = relationship("Seat", back_populates="hall", passive_deletes="all")
