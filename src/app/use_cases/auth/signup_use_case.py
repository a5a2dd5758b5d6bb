import logging

from libs.result import Error, Result, Return

from src.app.repositories.user_repository import UserAlreadyExistsError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, User
from .signup_dto import SignupCommand, SignupResponse

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResponse] (structured response)

    Business Logic:
    1. Reject taken username or email (no overwrite)
    2. Hash password
    3. Create User
    4. Create AuditEvent with action=signup
    5. Commit transaction atomically

    Signup does not log the user in; no session is created.
    """

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with validated name, username, email, password

        Returns:
            Result[SignupResponse] with the new user's public identity,
            or Error(USERNAME_ALREADY_EXISTS / EMAIL_ALREADY_EXISTS /
            USER_ALREADY_EXISTS)
        """
        email = command.email.lower()

        async with self.uow:
            if await self.uow.users.get_by_username(command.username):
                return Return.err(
                    Error("USERNAME_ALREADY_EXISTS", "Username already taken")
                )

            if await self.uow.users.get_by_email(email):
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            user = User(
                name=command.name,
                username=command.username,
                email=email,
                password_hash=await self.password_hasher.hash(command.password),
            )

            try:
                user = await self.uow.users.create(user)
            except UserAlreadyExistsError:
                # Lost a race against a concurrent signup with the same identity
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "Username or email already registered")
                )

            audit_event = AuditEvent(
                user_id=user.id,
                action="signup",
                event_metadata={"username": user.username},
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

            logger.info(f"User {user.id} signed up")

            return Return.ok(
                SignupResponse(
                    id=str(user.id),
                    name=user.name,
                    username=user.username,
                    email=user.email,
                    created_at=user.created_at,
                )
            )
