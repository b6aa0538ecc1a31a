from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.domain.entities import PasswordResetToken, PrincipalType


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """PasswordResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        stmt = select(PasswordResetToken).where(PasswordResetToken.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_principal(
        self, principal_type: PrincipalType, principal_id: UUID
    ) -> Optional[PasswordResetToken]:
        """Get the pending token of an account, if any"""
        stmt = select(PasswordResetToken).where(
            PasswordResetToken.principal_type == principal_type,
            PasswordResetToken.principal_id == principal_id,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def delete_by_principal(self, principal_type: PrincipalType, principal_id: UUID) -> int:
        """Delete every token of an account"""
        stmt = delete(PasswordResetToken).where(
            PasswordResetToken.principal_type == principal_type,
            PasswordResetToken.principal_id == principal_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def consume(self, token_id: UUID, now: datetime) -> bool:
        """Delete the token if it is still valid at `now`"""
        stmt = delete(PasswordResetToken).where(
            PasswordResetToken.id == token_id,
            PasswordResetToken.expires_at > now,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete_expired(self, principal_type: PrincipalType, now: datetime) -> int:
        """Delete tokens of one account type whose expiry is not after `now`"""
        stmt = delete(PasswordResetToken).where(
            PasswordResetToken.principal_type == principal_type,
            PasswordResetToken.expires_at <= now,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
