from abc import abstractmethod

from src.app.repositories.principal_repository import IPrincipalRepository
from src.domain.entities import Merchant


class IMerchantRepository(IPrincipalRepository):
    """Merchant repository interface - application layer"""

    @abstractmethod
    async def create(self, merchant: Merchant) -> Merchant:
        """Create a new merchant"""
        pass
