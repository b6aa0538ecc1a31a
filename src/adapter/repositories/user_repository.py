from src.adapter.repositories.principal_repository import PrincipalRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(PrincipalRepository, IUserRepository):
    """User repository implementation using SQLModel"""

    model = User
