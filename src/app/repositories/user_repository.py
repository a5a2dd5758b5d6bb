from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_email_or_username(self, identifier: str) -> Optional[User]:
        """Get user whose email or username matches the identifier"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises UserAlreadyExistsError on a uniqueness clash."""
        pass


class UserAlreadyExistsError(Exception):
    """Raised by create() when username or email is already taken."""
