from datetime import datetime
from typing import Callable

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.password_reset_notifier import LoggingPasswordResetNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.password_reset_notifier import IPasswordResetNotifier
from src.libs.clock import utc_now

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_clock() -> Callable[[], datetime]:
    """Time source for token issuance and expiry checks"""
    return utc_now


def get_password_reset_notifier() -> IPasswordResetNotifier:
    return LoggingPasswordResetNotifier()
