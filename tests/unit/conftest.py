import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import PrincipalType


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all required repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.merchants = MagicMock()
    uow.merchants.get_by_email = AsyncMock(return_value=None)
    uow.merchants.get_by_id = AsyncMock(return_value=None)
    uow.merchants.update = AsyncMock(side_effect=lambda merchant: merchant)

    repositories = {PrincipalType.user: uow.users, PrincipalType.merchant: uow.merchants}
    uow.principals = MagicMock(side_effect=lambda principal_type: repositories[principal_type])

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_by_token_hash = AsyncMock(return_value=None)
    uow.password_reset_tokens.get_by_principal = AsyncMock(return_value=None)
    uow.password_reset_tokens.delete_by_principal = AsyncMock(return_value=0)
    uow.password_reset_tokens.consume = AsyncMock(return_value=True)
    uow.password_reset_tokens.delete_expired = AsyncMock(return_value=0)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock()

    return uow
