"""
Request Password Reset Use Case

Issues a single-use password reset token for a user or merchant account.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    AuditAction,
    AuditEvent,
    CredentialPrincipal,
    PasswordResetToken,
    PrincipalType,
)
from src.libs.clock import utc_now
from src.libs.result import Error, Result, Return
from .dtos import IssuedPasswordReset, RequestPasswordResetOutcome
from .reset_tokens import build_reset_url, fingerprint_token, generate_reset_token

GENERIC_MESSAGE = "If an account exists for that email, a password reset link has been sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Accounts are looked up by email, customers first, then merchants
    - Generate cryptographically secure token, store only its SHA-256 hash
    - Token expires `token_ttl` after issuance (10 minutes by default)
    - A new token replaces any pending token of the same account
    - No email enumeration unless `reveal_unknown_accounts` is set
    - Requests inside the per-account cooldown are acknowledged but not issued
    - Audit event created for security tracking
    """

    def __init__(
        self,
        uow: UnitOfWork,
        frontend_url: str,
        token_ttl: timedelta = timedelta(minutes=10),
        cooldown: timedelta = timedelta(seconds=60),
        reveal_unknown_accounts: bool = False,
        clock: Callable[[], datetime] = utc_now,
        token_factory: Callable[[], str] = generate_reset_token,
    ):
        self.uow = uow
        self.frontend_url = frontend_url
        self.token_ttl = token_ttl
        self.cooldown = cooldown
        self.reveal_unknown_accounts = reveal_unknown_accounts
        self.clock = clock
        self.token_factory = token_factory

    async def _find_principal(
        self, email: str
    ) -> Tuple[Optional[PrincipalType], Optional[CredentialPrincipal]]:
        for principal_type in PrincipalType:
            principal = await self.uow.principals(principal_type).get_by_email(email)
            if principal is not None:
                return principal_type, principal
        return None, None

    async def execute(self, email: str) -> Result[RequestPasswordResetOutcome]:
        """
        Execute request password reset use case.

        Args:
            email: Account email address

        Returns:
            Result with the outcome; `outcome.issued` carries the plaintext
            token for delivery when one was issued

        Errors:
            - ACCOUNT_NOT_FOUND: only when reveal_unknown_accounts is enabled
        """
        email = email.strip().lower()
        generic = RequestPasswordResetOutcome(status="sent", message=GENERIC_MESSAGE)

        async with self.uow:
            principal_type, principal = await self._find_principal(email)

            if principal is None:
                if self.reveal_unknown_accounts:
                    return Return.err(
                        Error("ACCOUNT_NOT_FOUND", "No account found with that email")
                    )
                return Return.ok(generic)

            now = self.clock()

            pending = await self.uow.password_reset_tokens.get_by_principal(
                principal_type, principal.id
            )
            if pending is not None and now - pending.created_at < self.cooldown:
                return Return.ok(generic)

            reset_token = self.token_factory()

            # Replace, never stack: at most one pending token per account
            await self.uow.password_reset_tokens.delete_by_principal(principal_type, principal.id)

            password_reset_token = PasswordResetToken(
                principal_type=principal_type,
                principal_id=principal.id,
                token_hash=fingerprint_token(reset_token),
                created_at=now,
                expires_at=now + self.token_ttl,
            )
            await self.uow.password_reset_tokens.create(password_reset_token)

            audit_event = AuditEvent(
                principal_type=principal_type,
                principal_id=principal.id,
                action=AuditAction.password_reset_requested.value,
                event_metadata={
                    "email": email,
                    "token_id": str(password_reset_token.id),
                    "replaced_pending": pending is not None,
                },
                created_at=now,
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

            issued = IssuedPasswordReset(
                email=email,
                principal_type=principal_type,
                principal_id=principal.id,
                reset_token=reset_token,
                reset_url=build_reset_url(self.frontend_url, reset_token),
                expires_at=password_reset_token.expires_at,
            )
            return Return.ok(generic.model_copy(update={"issued": issued}))
