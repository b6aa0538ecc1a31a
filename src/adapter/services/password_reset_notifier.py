import logging

from src.app.services.password_reset_notifier import IPasswordResetNotifier
from src.app.use_cases.auth.dtos import IssuedPasswordReset

logger = logging.getLogger(__name__)


class LoggingPasswordResetNotifier(IPasswordResetNotifier):
    """
    Notifier that records the dispatch in the application log.

    Stands in until the email subsystem consumes reset links; the link
    itself is only written at DEBUG level.
    """

    async def send_password_reset(self, issued: IssuedPasswordReset) -> None:
        logger.info(
            f"Password reset link issued for {issued.principal_type.value} "
            f"{issued.principal_id}, expires at {issued.expires_at.isoformat()}"
        )
        logger.debug(f"Password reset URL for {issued.email}: {issued.reset_url}")
