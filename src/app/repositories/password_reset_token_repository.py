from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken, PrincipalType


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        pass

    @abstractmethod
    async def get_by_principal(
        self, principal_type: PrincipalType, principal_id: UUID
    ) -> Optional[PasswordResetToken]:
        """Get the pending token of an account, if any"""
        pass

    @abstractmethod
    async def delete_by_principal(self, principal_type: PrincipalType, principal_id: UUID) -> int:
        """Delete every token of an account, returns number of rows removed"""
        pass

    @abstractmethod
    async def consume(self, token_id: UUID, now: datetime) -> bool:
        """
        Delete the token if it is still valid at `now`.

        Returns True only for the caller whose delete removed the row, so two
        concurrent attempts cannot both consume the same token.
        """
        pass

    @abstractmethod
    async def delete_expired(self, principal_type: PrincipalType, now: datetime) -> int:
        """Delete tokens of one account type whose expiry is not after `now`"""
        pass
