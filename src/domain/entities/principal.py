"""
Credential-bearing principal

User and Merchant are stored in separate tables but share the fields the
password reset lifecycle reads and writes. Use cases depend on this
protocol, never on the concrete entity.
"""

from datetime import datetime
from typing import Optional, Protocol
from uuid import UUID


class CredentialPrincipal(Protocol):
    id: UUID
    email: str
    password_hash: str
    password_changed_at: Optional[datetime]
