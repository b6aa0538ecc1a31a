from typing import Dict

from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    """Business error the caller can act on, rendered with its own code"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_body(self) -> Dict[str, Dict[str, str]]:
        return {"error": {"code": self.base_error.code, "message": self.base_error.message}}


class ServerError(Exception):
    """Unexpected failure; the message stays in the logs"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_body(self) -> Dict[str, Dict[str, str]]:
        return {"error": {"code": self.base_error.code, "message": "Internal server error"}}
