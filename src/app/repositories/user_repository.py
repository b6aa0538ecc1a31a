from abc import abstractmethod

from src.app.repositories.principal_repository import IPrincipalRepository
from src.domain.entities import User


class IUserRepository(IPrincipalRepository):
    """User repository interface - application layer"""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass
