from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import AuditEvent, PrincipalType


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        pass

    @abstractmethod
    async def get_by_principal(
        self, principal_type: PrincipalType, principal_id: UUID, limit: int = 50
    ) -> List[AuditEvent]:
        """Get audit events for one account ordered by created_at DESC"""
        pass
