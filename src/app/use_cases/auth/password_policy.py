"""
Password strength policy applied before any credential is stored.
"""

from src.libs.result import Error, Result, Return

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordPolicy:
    """
    Password complexity rules.

    - At least `min_length` characters
    - At most 72 bytes once UTF-8 encoded
    - At least one letter and one digit
    """

    def __init__(self, min_length: int = 8):
        self.min_length = min_length

    def validate(self, password: str) -> Result[None]:
        if len(password) < self.min_length:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at least {self.min_length} characters long",
                )
            )

        if len(password.encode()) > BCRYPT_MAX_BYTES:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at most {BCRYPT_MAX_BYTES} bytes long",
                )
            )

        if not any(c.isalpha() for c in password) or not any(c.isdigit() for c in password):
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    "Password must contain at least one letter and one digit",
                )
            )

        return Return.ok(None)
