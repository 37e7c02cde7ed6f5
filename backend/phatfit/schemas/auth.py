# phatfit/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration, login and token verification.
"""
from typing import List

from pydantic import BaseModel, Field

from .record import Record

__all__ = ["RegisterRequest", "LoginRequest", "UserOut", "AuthResponse", "VerifyTokenResponse"]

class RegisterRequest(BaseModel):
    """
    Request model for user registration.
    Any non-empty strings are accepted; email format and password strength are not checked.
    """
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)  # Plain text, hashed server-side
    name: str = Field(min_length=1)  # Display name

class LoginRequest(BaseModel):
    """Request model for user login."""
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

class UserOut(BaseModel):
    """
    Public view of a user.
    Contains every user field except the password hash.
    """
    id: str  # User unique identifier
    email: str
    name: str
    records: List[Record] = []  # Full record history, in append order

class AuthResponse(BaseModel):
    """Response model for successful registration or login."""
    user: UserOut
    token: str  # Bearer token for the Authorization header

class VerifyTokenResponse(BaseModel):
    """Response model for token verification (session rehydration)."""
    user: UserOut
