"""
Background sweeper for expired password reset tokens.

Runs SweepExpiredResetTokensUseCase on a fixed interval inside the API
process. Failures are logged and the next pass retries.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.maintenance import SweepExpiredResetTokensUseCase
from src.libs.clock import utc_now

logger = logging.getLogger(__name__)


class ResetTokenSweeper:
    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        interval_seconds: float,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.session_factory = session_factory
        self.interval_seconds = interval_seconds
        self.clock = clock
        self._task: Optional[asyncio.Task] = None

    async def run_once(self) -> int:
        """Run a single pass; returns the number of tokens cleared (0 on storage failure)"""
        try:
            async with self.session_factory() as session:
                use_case = SweepExpiredResetTokensUseCase(SqlAlchemyUnitOfWork(session), clock=self.clock)
                result = await use_case.execute()
        except SQLAlchemyError:
            logger.exception("Password reset token sweep failed, retrying on next pass")
            return 0

        if result.is_err():
            logger.error(f"Password reset token sweep failed: {result.error.code}")
            return 0

        data = result.value
        if data.total:
            logger.info(f"Swept {data.total} expired password reset tokens: {data.cleared}")
        else:
            logger.debug("No expired password reset tokens to sweep")
        return data.total

    async def _run_forever(self):
        while True:
            try:
                await self.run_once()
            except Exception:
                logger.exception("Password reset token sweep crashed, retrying on next pass")
            await asyncio.sleep(self.interval_seconds)

    def start(self):
        if self._task is None:
            self._task = asyncio.create_task(self._run_forever())
            logger.info(f"Password reset token sweeper started (every {self.interval_seconds}s)")

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Password reset token sweeper stopped")
