from datetime import datetime, timedelta
from typing import Callable

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.rate_limiter import limiter
from src.app.services.password_reset_notifier import IPasswordResetNotifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    PasswordPolicy,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import get_clock, get_password_reset_notifier, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class ForgotPasswordRequest(BaseModel):
    """
    Forgot password HTTP request payload

    Validates incoming password reset request.
    """

    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
    response_model_exclude_none=True,
)
@limiter.limit(ApplicationConfig.PASSWORD_RESET_RATE_LIMIT)
async def forgot_password(
    request: Request,
    payload: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: IPasswordResetNotifier = Depends(get_password_reset_notifier),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    """
    Request Password Reset

    Issues a single-use reset token for a customer or merchant account and
    hands the reset link to the notifier. Token expires in 10 minutes and
    only its SHA-256 hash is stored.

    Security:
        - No email enumeration (same response for known/unknown emails)
        - IP rate limit plus per-account cooldown
        - Token is cryptographically secure (32 bytes)

    Returns:
        - 200 OK: Always returns success (no enumeration)
        - 404 Not Found: ACCOUNT_NOT_FOUND, only when enumeration is allowed
        - 429 Too Many Requests: Rate limit exceeded
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        frontend_url=ApplicationConfig.FRONTEND_URL,
        token_ttl=timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TOKEN_TTL_MINUTES),
        cooldown=timedelta(seconds=ApplicationConfig.PASSWORD_RESET_COOLDOWN_SECONDS),
        reveal_unknown_accounts=ApplicationConfig.PASSWORD_RESET_REVEAL_UNKNOWN_EMAIL,
        clock=clock,
    )
    result = await use_case.execute(payload.email)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    outcome = result.value
    reset_url = None
    if outcome.issued is not None:
        await notifier.send_password_reset(outcome.issued)
        # Development only: lets the frontend follow the link without email
        if ApplicationConfig.PASSWORD_RESET_EXPOSE_URL:
            reset_url = outcome.issued.reset_url

    return RequestPasswordResetResponse(
        status=outcome.status, message=outcome.message, reset_url=reset_url
    )


class ResetPasswordRequest(BaseModel):
    """
    Reset password HTTP request payload

    The token travels in the URL path; the body carries the new password.
    """

    password: str = Field(..., description="New password")


@router.post(
    "/reset-password/{reset_token}",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    reset_token: str,
    payload: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    """
    Confirm Password Reset

    Validates the reset token and updates the account password.

    Security:
        - Token must not be expired (strictly before expires_at)
        - Token is deleted on success, so it works exactly once
        - Password must meet complexity requirements
        - Unknown, expired and used tokens share one error

    Raises:
        - 400 Bad Request: INVALID_TOKEN or INVALID_PASSWORD
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(
        uow,
        password_policy=PasswordPolicy(min_length=ApplicationConfig.PASSWORD_MIN_LENGTH),
        bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS,
        clock=clock,
    )
    result = await use_case.execute(reset_token, payload.password)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    # Return Pydantic model directly (FastAPI auto-serializes)
    return result.value
