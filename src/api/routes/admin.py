"""
Admin API Routes - Maintenance Endpoints

These endpoints are for schedulers and operators.
Authentication is via Admin API Key.
"""

from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.maintenance import (
    SweepExpiredResetTokensResponse,
    SweepExpiredResetTokensUseCase,
)
from src.depends import get_clock, get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/password-reset-tokens/sweep",
    status_code=status.HTTP_200_OK,
    response_model=SweepExpiredResetTokensResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def sweep_password_reset_tokens(
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    """
    Sweep Expired Password Reset Tokens

    Deletes every reset token whose expiry has passed, for all account
    types. Safe to call repeatedly; a second call clears nothing.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = SweepExpiredResetTokensUseCase(uow, clock=clock)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
