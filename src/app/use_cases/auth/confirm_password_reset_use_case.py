"""
Confirm Password Reset Use Case

Consumes a password reset token and sets the new password.
"""

from datetime import datetime
from typing import Callable, Optional

import bcrypt

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, AuditEvent
from src.libs.clock import utc_now
from src.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse
from .password_policy import PasswordPolicy
from .reset_tokens import fingerprint_token


def _invalid_token() -> Result[ConfirmPasswordResetResponse]:
    # Unknown, expired and already-used tokens are indistinguishable to the caller
    return Return.err(Error("INVALID_TOKEN", "Invalid or expired password reset token"))


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - New password is checked against the policy before any state is read
    - Token is looked up by its SHA-256 hash
    - Token is valid only while now < expires_at
    - Token is deleted in the same transaction that changes the password
    - Password is hashed with bcrypt
    - Audit event created for security tracking
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_policy: Optional[PasswordPolicy] = None,
        bcrypt_rounds: int = 12,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_policy = password_policy or PasswordPolicy()
        self.bcrypt_rounds = bcrypt_rounds
        self.clock = clock

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from the reset link)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_PASSWORD: Password does not meet complexity requirements
            - INVALID_TOKEN: Token unknown, expired or already used
        """
        password_validation = self.password_policy.validate(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        token_hash = fingerprint_token(token)

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(token_hash)
            if reset_token is None:
                return _invalid_token()

            now = self.clock()
            if reset_token.is_expired(now):
                return _invalid_token()

            principals = self.uow.principals(reset_token.principal_type)
            principal = await principals.get_by_id(reset_token.principal_id)
            if principal is None:
                return _invalid_token()

            password_hash = bcrypt.hashpw(new_password.encode(), bcrypt.gensalt(self.bcrypt_rounds))

            # Conditional delete: only one concurrent attempt can win
            consumed = await self.uow.password_reset_tokens.consume(reset_token.id, now)
            if not consumed:
                return _invalid_token()

            principal.password_hash = password_hash.decode()
            principal.password_changed_at = now
            await principals.update(principal)

            audit_event = AuditEvent(
                principal_type=reset_token.principal_type,
                principal_id=principal.id,
                action=AuditAction.password_reset_completed.value,
                event_metadata={"token_id": str(reset_token.id)},
                created_at=now,
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
