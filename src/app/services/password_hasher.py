from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way password transform used at signup and login"""

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Produce a digest from a plain text password"""
        pass

    @abstractmethod
    async def verify(self, plaintext: str, digest: str) -> bool:
        """Check a plain text password against a stored digest"""
        pass

    @abstractmethod
    async def verify_dummy(self, plaintext: str) -> bool:
        """
        Spend the same time as verify() against a digest that matches nothing.

        Used when the account does not exist so that both login failures
        take equally long. Always returns False.
        """
        pass
