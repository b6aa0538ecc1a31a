from typing import ClassVar, Optional, Type
from uuid import UUID

from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession


class PrincipalRepository:
    """
    Shared SQLModel queries for account tables.

    Subclasses set `model`; the table must have id, email and password_hash.
    """

    model: ClassVar[Type[SQLModel]]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[SQLModel]:
        """Get account by email address, ignoring case"""
        stmt = select(self.model).where(func.lower(self.model.email) == email.lower())
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id(self, principal_id: UUID) -> Optional[SQLModel]:
        """Get account by ID"""
        stmt = select(self.model).where(self.model.id == principal_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, principal: SQLModel) -> SQLModel:
        """Create a new account"""
        self.session.add(principal)
        await self.session.flush()
        await self.session.refresh(principal)
        return principal

    async def update(self, principal: SQLModel) -> SQLModel:
        """Update existing account"""
        self.session.add(principal)
        await self.session.flush()
        await self.session.refresh(principal)
        return principal
