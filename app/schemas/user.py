from typing import Optional
from pydantic import BaseModel, EmailStr, UUID4
from datetime import datetime


# Shared properties
class UserBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    date_of_birth: datetime


# Properties to receive via API on creation (POST /auth/register)
class UserCreate(UserBase):
    password: str


# Properties to receive via API on admin creation (POST /auth/admin/register)
class AdminCreate(UserCreate):
    admin_secret: str


class UserInDBBase(UserBase):
    id: UUID4
    is_administrator: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Properties returned via API, never the password hash
class User(UserInDBBase):
    pass


class Token(BaseModel):
    access_token: UUID4
    token_type: str
    expires: datetime
    user: User


class TokenRefresh(BaseModel):
    access_token: UUID4
    expires: datetime

    class Config:
        from_attributes = True
