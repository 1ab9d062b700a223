import asyncio
import logging

from usermodel.core.config import settings
from usermodel.core.logging_config import configure_logging
from usermodel.db import db_manager

logger = logging.getLogger(__name__)


async def bootstrap() -> None:
    """Create the tables for every mapped entity, then release the pool."""
    logger.info("Starting %s (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)

    logger.info("Initializing database schema...")
    try:
        await db_manager.create_all()
    finally:
        logger.info("Disconnecting database pool...")
        await db_manager.dispose()
    logger.info("Database pool disconnected.")


def main() -> None:
    configure_logging()
    asyncio.run(bootstrap())


if __name__ == "__main__":
    main()
