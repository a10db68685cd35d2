# /attendance_app/models/user_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator


class UserBase(BaseModel):
    username: str = Field(..., min_length=1, description="The unique login name of the user.")

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username must not be empty.")
        return value


class UserCreate(UserBase):
    """The payload for registering a new account."""
    password: str = Field(..., min_length=1, description="The plain-text password; only its hash is stored.")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only looks at the first 72 bytes.
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes long.")
        return value


class User(UserBase):
    """The public representation of an account. Never carries the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    is_active: bool = True
    created_at: Optional[datetime] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
