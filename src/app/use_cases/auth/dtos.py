"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
"""

from datetime import datetime
from pydantic import BaseModel


class LoginResult(BaseModel):
    """
    Result of a successful login.

    The token is handed to the transport layer (cookie) by the API layer and
    never serialized into a response body.
    """

    session_token: str
    session_id: str
    user_id: str
    expires_at: datetime


class LoginResponse(BaseModel):
    """Response body for login"""

    success: bool = True


class LogoutResponse(BaseModel):
    """Response body for logout"""

    success: bool = True


class UserProfileResponse(BaseModel):
    """Public identity of the authenticated user"""

    id: str
    name: str
    username: str
    email: str
    created_at: datetime
