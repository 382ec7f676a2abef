"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, DB engine dispose).
No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from catechesis.core.config import get_settings
from catechesis.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup; dispose the SQL engine on shutdown."""
    setup_logging()
    settings = get_settings()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    yield

    from catechesis.infrastructure.persistence import database

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
