from src.adapter.repositories.principal_repository import PrincipalRepository
from src.app.repositories.merchant_repository import IMerchantRepository
from src.domain.entities import Merchant


class MerchantRepository(PrincipalRepository, IMerchantRepository):
    """Merchant repository implementation using SQLModel"""

    model = Merchant
