from abc import ABC, abstractmethod

from src.app.use_cases.auth.dtos import IssuedPasswordReset


class IPasswordResetNotifier(ABC):
    """Delivers a freshly issued reset link to the account owner"""

    @abstractmethod
    async def send_password_reset(self, issued: IssuedPasswordReset) -> None:
        pass
