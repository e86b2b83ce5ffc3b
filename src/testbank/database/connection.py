"""
Database connection management
"""

import logging

import aiosqlite
from fastapi import Request

from testbank.database.schema import ensure_schema
from testbank.models.enums import ServiceVariant

logger = logging.getLogger(__name__)

async def init_database(database_path: str, variant: ServiceVariant) -> aiosqlite.Connection:
    """Open the database file and make sure the schema exists"""
    # Autocommit: each statement is its own transaction on the shared connection
    db = await aiosqlite.connect(database_path, isolation_level=None)
    db.row_factory = aiosqlite.Row

    try:
        # Test connection
        async with db.execute("SELECT 1") as cursor:
            await cursor.fetchone()
        await ensure_schema(db, variant)
    except Exception:
        await db.close()
        raise

    logger.info(f"Connected to the test database: {database_path}")
    return db


async def close_database(db: aiosqlite.Connection) -> None:
    """Close the database connection"""
    if db is not None:
        await db.close()
    logger.info("Database connection closed")


def get_database(request: Request) -> aiosqlite.Connection:
    """FastAPI dependency returning the connection opened at startup"""
    return request.app.state.db
