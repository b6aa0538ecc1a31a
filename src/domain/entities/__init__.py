"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AuditAction, PrincipalType

# Export all entities
from .principal import CredentialPrincipal
from .user import User
from .merchant import Merchant
from .password_reset_token import PasswordResetToken
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AuditAction",
    "PrincipalType",
    # Entities
    "CredentialPrincipal",
    "User",
    "Merchant",
    "PasswordResetToken",
    "AuditEvent",
]
