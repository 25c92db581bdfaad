#!/usr/bin/env python3
"""Create the database tables with Logfire error tracking."""

import asyncio
import sys

import logfire

from auth0link.config import Settings
from auth0link.persistence.database import create_engine
from auth0link.persistence.tables import metadata
from auth0link.util.observability import configure_logfire


async def create_tables(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    finally:
        await engine.dispose()


def main() -> int:
    """Create missing tables and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Creating database tables")
        asyncio.run(create_tables(settings))
        logfire.info("Database tables ready", tables=sorted(metadata.tables))
        return 0

    except Exception as e:
        logfire.error(
            "Table creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
