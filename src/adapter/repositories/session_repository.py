from datetime import datetime
from typing import Optional

from sqlalchemy import delete, or_, update
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session


class SessionRepository(ISessionRepository):
    """
    Session store backed by the database.

    Owns its own session factory instead of sharing the request's unit of
    work, so every operation commits on its own and a revocation is visible
    to all readers as soon as the call returns.
    """

    def __init__(self, engine: AsyncEngine):
        self.session_factory = sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        async with self.session_factory() as db:
            db.add(session_obj)
            await db.commit()
            await db.refresh(session_obj)
        return session_obj

    async def get_by_token_hash(self, token_hash: str) -> Optional[Session]:
        """Get session by token hash"""
        async with self.session_factory() as db:
            stmt = select(Session).where(Session.token_hash == token_hash)
            result = await db.exec(stmt)
            return result.one_or_none()

    async def revoke_by_token_hash(
        self, token_hash: str, revoked_at: datetime
    ) -> Optional[Session]:
        """Revoke a session; the conditional UPDATE makes concurrent revokes race-free"""
        async with self.session_factory() as db:
            stmt = (
                update(Session)
                .where(Session.token_hash == token_hash, Session.revoked == False)
                .values(revoked=True, revoked_at=revoked_at)
            )
            result = await db.execute(stmt)
            if result.rowcount == 0:
                await db.rollback()
                return None

            revoked = await db.exec(
                select(Session).where(Session.token_hash == token_hash)
            )
            session_obj = revoked.one()
            await db.commit()
            return session_obj

    async def delete_inactive(self, now: datetime) -> int:
        """Delete revoked or expired sessions"""
        async with self.session_factory() as db:
            stmt = delete(Session).where(
                or_(Session.revoked == True, Session.expires_at <= now)
            )
            result = await db.execute(stmt)
            await db.commit()
            return result.rowcount
