from abc import ABC, abstractmethod

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.merchant_repository import IMerchantRepository
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.principal_repository import IPrincipalRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import PrincipalType


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    merchants: IMerchantRepository
    password_reset_tokens: IPasswordResetTokenRepository
    audit_events: IAuditEventRepository

    def principals(self, principal_type: PrincipalType) -> IPrincipalRepository:
        """Repository for the given account type"""
        if principal_type == PrincipalType.merchant:
            return self.merchants
        return self.users

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
