"""
AuditEvent Entity

Immutable log of security-relevant account events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.libs.clock import utc_now
from .enums import PrincipalType


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of password reset activity.

    Business Rules:
    - Immutable (never updated or deleted)
    - Never contains plaintext tokens or passwords
    - Metadata stores additional context (token id, email, etc.)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    principal_type: Optional[PrincipalType] = Field(default=None)
    principal_id: Optional[UUID] = Field(default=None)

    action: str = Field(max_length=100)  # e.g., "password_reset_requested"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_principal", "principal_type", "principal_id"),
    )
