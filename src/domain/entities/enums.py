"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class PrincipalType(str, Enum):
    """Kind of credential-bearing account"""

    user = "user"
    merchant = "merchant"


class AuditAction(str, Enum):
    """Security-relevant actions recorded in the audit log"""

    password_reset_requested = "password_reset_requested"
    password_reset_completed = "password_reset_completed"
