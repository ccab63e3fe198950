from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator


class LoginRequest(BaseModel):
    """Login credentials."""
    email: EmailStr = Field(..., description="User email")
    password: str = Field(..., description="User password")

    @field_validator("email", mode="before")
    @classmethod
    def _email_required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Email is required")
        return v

    @field_validator("password", mode="before")
    @classmethod
    def _password_required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Password is required")
        return v
