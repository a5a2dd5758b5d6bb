"""
Session Manager

Sole authority for issuing, resolving and revoking session tokens.
"""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from src.app.repositories.session_repository import ISessionRepository
from src.domain.base import utcnow
from src.domain.entities import Session

logger = logging.getLogger(__name__)

# 32 random bytes -> 256 bits of entropy
TOKEN_BYTES = 32


@dataclass(frozen=True)
class IssuedSession:
    """A freshly issued session; the only place the plain token ever appears"""

    token: str
    session: Session


class SessionManager:
    """
    Issues opaque session tokens and maps them to users.

    Business Rules:
    - Tokens are cryptographically random; only their SHA-256 hash is stored
    - Lifecycle per token: Active --(logout | expiry)--> Revoked, never back
    - Expiry is checked lazily on lookup; an expired session is revoked then
    - Revocation is idempotent
    - Revoked/expired entries are purged every `purge_every` issuances;
      active sessions are never purged
    """

    def __init__(
        self,
        store: ISessionRepository,
        ttl: timedelta = timedelta(hours=24),
        purge_every: int = 100,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.ttl = ttl
        self.purge_every = purge_every
        self.clock = clock
        self._issued = 0

    @staticmethod
    def hash_token(token: str) -> str:
        return hashlib.sha256(token.encode()).hexdigest()

    async def issue(self, user_id: UUID) -> IssuedSession:
        """
        Start a new session for a user.

        Args:
            user_id: Owner of the session

        Returns:
            IssuedSession with the plain token (to hand to the client) and
            the stored session
        """
        token = secrets.token_urlsafe(TOKEN_BYTES)
        now = self.clock()
        session = Session(
            user_id=user_id,
            token_hash=self.hash_token(token),
            created_at=now,
            expires_at=now + self.ttl,
        )
        session = await self.store.create(session)
        logger.info(f"Session {session.id} issued for user {user_id}")

        self._issued += 1
        if self.purge_every and self._issued % self.purge_every == 0:
            await self.purge_expired()

        return IssuedSession(token=token, session=session)

    async def resolve(self, token: Optional[str]) -> Optional[Session]:
        """
        Resolve a token to its live session.

        Returns None for a missing, unknown, revoked or expired token.
        """
        if not token:
            return None

        token_hash = self.hash_token(token)
        session = await self.store.get_by_token_hash(token_hash)
        if session is None or session.revoked:
            return None

        now = self.clock()
        if session.expires_at <= now:
            await self.store.revoke_by_token_hash(token_hash, now)
            logger.info(f"Session {session.id} expired")
            return None

        return session

    async def revoke(self, token: Optional[str]) -> Optional[Session]:
        """
        Revoke the session bound to a token.

        Returns the session revoked by this call, or None when there was
        nothing left to revoke.
        """
        if not token:
            return None

        session = await self.store.revoke_by_token_hash(
            self.hash_token(token), self.clock()
        )
        if session is not None:
            logger.info(f"Session {session.id} revoked")
        return session

    async def purge_expired(self) -> int:
        """Drop revoked and expired sessions from the store"""
        count = await self.store.delete_inactive(self.clock())
        if count:
            logger.debug(f"Purged {count} inactive session(s)")
        return count
