"""
Authentication Use Cases

Password reset flows for every account type.
"""

from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .password_policy import PasswordPolicy
from .dtos import (
    IssuedPasswordReset,
    RequestPasswordResetOutcome,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)

__all__ = [
    # Use Cases
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Policies
    "PasswordPolicy",
    # DTOs - Internal
    "IssuedPasswordReset",
    "RequestPasswordResetOutcome",
    # DTOs - Responses
    "RequestPasswordResetResponse",
    "ConfirmPasswordResetResponse",
]
