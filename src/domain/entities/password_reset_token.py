"""
PasswordResetToken Entity

Short-lived, single-use password reset tokens.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.libs.clock import utc_now
from .enums import PrincipalType


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - pending password reset for one account.

    Business Rules:
    - Only the SHA-256 hash of the secret is stored
    - expires_at is fixed at issuance (created_at + TTL), never extended
    - At most one pending token per account; issuing replaces the old one
    - Single-use: the row is deleted when the reset succeeds
    - Expired rows are deleted by the sweeper
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    principal_type: PrincipalType
    principal_id: UUID
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("principal_type", "principal_id", name="uq_password_reset_principal"),
        Index("idx_password_reset_expires_at", "expires_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        """A token is valid only while now is strictly before expires_at"""
        return self.expires_at <= now
