"""
Sweep Expired Reset Tokens Use Case

Housekeeping pass that deletes password reset tokens past their expiry.
"""

from datetime import datetime
from typing import Callable

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PrincipalType
from src.libs.clock import utc_now
from src.libs.result import Result, Return
from .dtos import SweepExpiredResetTokensResponse


class SweepExpiredResetTokensUseCase:
    """
    Use case for clearing stale password reset tokens.

    Business Rules:
    - A token is stale once now >= expires_at, the same boundary the
      confirmation flow uses
    - Covers every account type
    - Never touches account passwords
    - Zero matches is a normal outcome; a second pass in a row clears nothing
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[SweepExpiredResetTokensResponse]:
        now = self.clock()

        async with self.uow:
            cleared = {}
            for principal_type in PrincipalType:
                cleared[principal_type.value] = await self.uow.password_reset_tokens.delete_expired(
                    principal_type, now
                )

            await self.uow.commit()

        return Return.ok(
            SweepExpiredResetTokensResponse(
                status="swept",
                cleared=cleared,
                total=sum(cleared.values()),
            )
        )
