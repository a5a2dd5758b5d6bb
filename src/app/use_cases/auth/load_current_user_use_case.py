"""
Load Current User Use Case

Loads the public identity of the user owning the current session.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UserProfileResponse


class LoadCurrentUserUseCase:
    """
    Use case behind GET /auth/me.

    The session has already been resolved by the Session Manager; this
    only turns its user_id into a profile.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                UserProfileResponse(
                    id=str(user.id),
                    name=user.name,
                    username=user.username,
                    email=user.email,
                    created_at=user.created_at,
                )
            )
