"""
User Entity

A marketplace customer.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.libs.clock import utc_now


class User(SQLModel, table=True):
    """
    User entity - a customer account.

    Business Rules:
    - Email must be unique across all users (matched case-insensitively)
    - Password stored as bcrypt hash
    - Password reset tokens live in password_reset_tokens, not on this row
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    password_changed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
