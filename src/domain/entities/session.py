"""
Session Entity

Server-side record of an authenticated login.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - binds an opaque token to a user.

    Business Rules:
    - Only the SHA-256 hash of the token is stored
    - A revoked session never authenticates again
    - Expired sessions are revoked on lookup
    - A user may hold several sessions at once
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(nullable=False, index=True)

    token_hash: str = Field(unique=True, index=True, max_length=64)
    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_session_expires_at", "expires_at"),
        Index("idx_session_revoked", "revoked"),
    )

    def is_active(self, now: datetime) -> bool:
        return not self.revoked and self.expires_at > now
