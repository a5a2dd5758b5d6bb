"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- SignupResponse: Output from use case (structured result)
"""

from datetime import datetime
from pydantic import BaseModel


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    name: str
    username: str
    email: str
    password: str


class SignupResponse(BaseModel):
    """
    Signup response - public identity of the new user

    Never carries the password or its hash.
    """

    id: str
    name: str
    username: str
    email: str
    created_at: datetime
