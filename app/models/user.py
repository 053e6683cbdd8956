import uuid
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base, TimestampMixin

class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False) # bcrypt hash
    date_of_birth = Column(DateTime(timezone=True), nullable=False)
    is_administrator = Column(Boolean, nullable=False, default=False)

    # Relationships
    auth_tokens = relationship("AuthenticationToken", back_populates="user", passive_deletes="all")

class AuthenticationToken(TimestampMixin, Base):
    __tablename__ = "auth_tokens"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    expires = Column(DateTime(timezone=True), nullable=False)

    user = relationship("User", back_populates="auth_tokens")
