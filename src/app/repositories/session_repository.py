from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import Session


class ISessionRepository(ABC):
    """
    Session store interface - application layer

    Every method is atomic with respect to the others: a session is never
    observed half-created or half-revoked.
    """

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Store a new session"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Session]:
        """Get session by token hash (revoked and expired sessions included)"""
        pass

    @abstractmethod
    async def revoke_by_token_hash(
        self, token_hash: str, revoked_at: datetime
    ) -> Optional[Session]:
        """
        Revoke the session if it is not revoked yet.

        Returns the session revoked by this call, None if it was unknown or
        already revoked.
        """
        pass

    @abstractmethod
    async def delete_inactive(self, now: datetime) -> int:
        """Delete revoked or expired sessions. Returns count of deleted sessions."""
        pass
