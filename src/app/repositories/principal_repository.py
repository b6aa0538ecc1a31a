from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import CredentialPrincipal


class IPrincipalRepository(ABC):
    """Repository interface shared by every credential-bearing account type"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[CredentialPrincipal]:
        """Get account by email address, case-insensitive"""
        pass

    @abstractmethod
    async def get_by_id(self, principal_id: UUID) -> Optional[CredentialPrincipal]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def update(self, principal: CredentialPrincipal) -> CredentialPrincipal:
        """Update existing account"""
        pass
