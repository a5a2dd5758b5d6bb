"""
User Entity

Identity record created at signup.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a person who can sign in.

    Business Rules:
    - Username must be unique across all users
    - Email must be unique across all users (stored lower-case)
    - Password stored as bcrypt hash, never in plain text
    - Immutable after signup
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    username: str = Field(unique=True, index=True, max_length=32)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
