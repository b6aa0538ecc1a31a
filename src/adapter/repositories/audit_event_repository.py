from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent, PrincipalType


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_by_principal(
        self, principal_type: PrincipalType, principal_id: UUID, limit: int = 50
    ) -> List[AuditEvent]:
        """Get audit events for one account ordered by created_at DESC"""
        stmt = (
            select(AuditEvent)
            .where(
                AuditEvent.principal_type == principal_type,
                AuditEvent.principal_id == principal_id,
            )
            .order_by(AuditEvent.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
