"""User and authentication models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from app.core.security import BCRYPT_MAX_BYTES


class Role(str, Enum):
    ADMIN = "Admin"
    ANALYST = "Analyst"
    MANAGER = "Manager"
    VIEWER = "Viewer"


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    token: str
    role: Role


class RegisterRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=8)
    role: Role = Role.VIEWER

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v


class User(BaseModel):
    id: int
    email: str
    role: Role
