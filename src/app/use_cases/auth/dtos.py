"""
Password Reset Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import PrincipalType


# ============================================================================
# Internal DTOs
# ============================================================================


class IssuedPasswordReset(BaseModel):
    """
    A freshly issued reset token, handed to the delivery channel.

    This is the only object that ever carries the plaintext token.
    """

    email: str
    principal_type: PrincipalType
    principal_id: UUID
    reset_token: str
    reset_url: str
    expires_at: datetime


class RequestPasswordResetOutcome(BaseModel):
    """Result of the issuer; `issued` is None when nothing was sent"""

    status: str
    message: str
    issued: Optional[IssuedPasswordReset] = None


# ============================================================================
# Response DTOs
# ============================================================================


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str
    reset_url: Optional[str] = None


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
