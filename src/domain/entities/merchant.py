"""
Merchant Entity

A seller account on the marketplace.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.libs.clock import utc_now


class Merchant(SQLModel, table=True):
    """
    Merchant entity - a business account.

    Business Rules:
    - Email must be unique across all merchants (matched case-insensitively)
    - Shares the password reset lifecycle with User
    """

    __tablename__ = "merchants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)

    business_name: str = Field(max_length=255)
    is_verified: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    password_changed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
