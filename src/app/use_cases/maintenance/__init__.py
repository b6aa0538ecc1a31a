"""
Maintenance Use Cases

Scheduled and on-demand housekeeping.
"""

from .sweep_expired_reset_tokens_use_case import SweepExpiredResetTokensUseCase
from .dtos import SweepExpiredResetTokensResponse

__all__ = [
    "SweepExpiredResetTokensUseCase",
    "SweepExpiredResetTokensResponse",
]
