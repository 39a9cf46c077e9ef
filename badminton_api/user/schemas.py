# Đây là file schemas.py cho module user

from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime
from .models import Role


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=20)
    password: str
    address: str = Field(..., min_length=1, max_length=255)


class Login(BaseModel):
    mail: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    user_id: int
    username: str
    mail: str
    access_token: str


class User(BaseModel):
    user_id: int
    username: str
    mail: str
    phone_number: str
    role: Role
    address: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
