"""
Use Cases

Use cases are organized into domain folders:
- auth/: Password reset flows
- maintenance/: Housekeeping passes
"""

from .auth import (
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .maintenance import (
    SweepExpiredResetTokensUseCase,
)

__all__ = [
    # Auth
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Maintenance
    "SweepExpiredResetTokensUseCase",
]
