"""Session helper shared by board services.

Wraps stores.postgres.get_session so every SQLAlchemy failure surfaces as
StoreError (500, raw message) at the service boundary.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.errors import StoreError
from app.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def store_session() -> AsyncGenerator[AsyncSession, None]:
    """Session context manager that converts store failures to StoreError."""
    try:
        async with get_session() as session:
            yield session
    except SQLAlchemyError as e:
        logger.exception("Store operation failed")
        raise StoreError(str(e)) from e
