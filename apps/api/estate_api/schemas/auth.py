"""Schemas for admin sign-in."""
from __future__ import annotations

from pydantic import BaseModel

from .common import CamelModel


class LoginRequest(BaseModel):
    # Blank values are checked by the service so both fields report together.
    username: str | None = None
    password: str | None = None


class AdminUser(CamelModel):
    id: str
    username: str
    first_name: str | None = None
    last_name: str | None = None
    role: str = "admin"


class LoginResponse(BaseModel):
    success: bool
    token: str
    user: AdminUser


class VerifyResponse(BaseModel):
    authenticated: bool
    user: AdminUser


class LogoutResponse(BaseModel):
    success: bool
