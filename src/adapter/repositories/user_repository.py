from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository, UserAlreadyExistsError
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email.lower())
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email_or_username(self, identifier: str) -> Optional[User]:
        """
        Get user by email or username.

        Usernames cannot contain "@", so at most one user can match.
        """
        stmt = select(User).where(
            or_(User.email == identifier.lower(), User.username == identifier)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise UserAlreadyExistsError(str(exc.orig)) from exc
        await self.session.refresh(user)
        return user
