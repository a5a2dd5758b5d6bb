"""
Login Use Case

Authenticates a user and starts a server-side session.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from .dtos import LoginResult

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")


class LoginUseCase:
    """
    Use case for user login and session issuance.

    Business Rules:
    - Identifier matches either email or username
    - Unknown identifier and wrong password fail identically
      (same error, same bcrypt cost)
    - Each successful login creates a new session; existing sessions stay valid
    - A login that fails after issuing revokes the session it issued
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        session_manager: SessionManager,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.session_manager = session_manager

    async def execute(self, email_or_username: str, password: str) -> Result[LoginResult]:
        """
        Execute login use case.

        Args:
            email_or_username: User email or username
            password: Plain text password

        Returns:
            Result with LoginResult carrying the session token, or
            Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email_or_username(email_or_username)

            if user is None:
                # Hash anyway so a missing account takes as long as a bad password
                await self.password_hasher.verify_dummy(password)
                logger.info("Login failed: unknown identifier")
                return Return.err(INVALID_CREDENTIALS)

            if not await self.password_hasher.verify(password, user.password_hash):
                logger.info(f"Login failed for user {user.id}: bad password")
                return Return.err(INVALID_CREDENTIALS)

            issued = await self.session_manager.issue(user.id)

            try:
                audit = AuditEvent(
                    user_id=user.id,
                    action="login",
                    event_metadata={"session_id": str(issued.session.id)},
                )
                await self.uow.audit_events.create(audit)

                await self.uow.commit()
            except Exception:
                # An unreturned token must not leave a live session behind
                await self.session_manager.revoke(issued.token)
                logger.warning(f"Login for user {user.id} aborted, session {issued.session.id} revoked")
                raise

            logger.info(f"User {user.id} logged in")

            return Return.ok(
                LoginResult(
                    session_token=issued.token,
                    session_id=str(issued.session.id),
                    user_id=str(user.id),
                    expires_at=issued.session.expires_at,
                )
            )
