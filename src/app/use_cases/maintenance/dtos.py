from typing import Dict

from pydantic import BaseModel


class SweepExpiredResetTokensResponse(BaseModel):
    """Response for sweep expired reset tokens use case"""

    status: str
    cleared: Dict[str, int]
    total: int
