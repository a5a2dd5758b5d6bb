"""
Logout Use Case

Revokes the current session.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - Idempotent: a missing, unknown or already revoked token still succeeds
    - The session is revoked before execute() returns
    - Audit event only when a live session was actually revoked
    """

    def __init__(self, uow: UnitOfWork, session_manager: SessionManager):
        self.uow = uow
        self.session_manager = session_manager

    async def execute(self, session_token: Optional[str]) -> Result[LogoutResponse]:
        session = await self.session_manager.revoke(session_token)
        if session is None:
            return Return.ok(LogoutResponse())

        async with self.uow:
            audit = AuditEvent(
                user_id=session.user_id,
                action="logout",
                event_metadata={"session_id": str(session.id)},
            )
            await self.uow.audit_events.create(audit)
            await self.uow.commit()

        logger.info(f"User {session.user_id} logged out")

        return Return.ok(LogoutResponse())
