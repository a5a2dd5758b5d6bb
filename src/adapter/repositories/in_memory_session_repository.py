import asyncio
from datetime import datetime
from typing import Dict, Optional

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session


class InMemorySessionRepository(ISessionRepository):
    """
    Session store kept in process memory.

    Sessions are keyed by token hash. A single asyncio.Lock serialises every
    read and write, so requests on the event loop see each session either
    fully created/revoked or not at all. Sessions are lost on restart.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._lock = asyncio.Lock()

    async def create(self, session_obj: Session) -> Session:
        async with self._lock:
            if session_obj.token_hash in self._sessions:
                raise ValueError("Session token collision")
            self._sessions[session_obj.token_hash] = session_obj
            return session_obj

    async def get_by_token_hash(self, token_hash: str) -> Optional[Session]:
        async with self._lock:
            return self._sessions.get(token_hash)

    async def revoke_by_token_hash(
        self, token_hash: str, revoked_at: datetime
    ) -> Optional[Session]:
        async with self._lock:
            session_obj = self._sessions.get(token_hash)
            if session_obj is None or session_obj.revoked:
                return None
            session_obj.revoked = True
            session_obj.revoked_at = revoked_at
            return session_obj

    async def delete_inactive(self, now: datetime) -> int:
        async with self._lock:
            stale = [
                token_hash
                for token_hash, session_obj in self._sessions.items()
                if not session_obj.is_active(now)
            ]
            for token_hash in stale:
                del self._sessions[token_hash]
            return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)
