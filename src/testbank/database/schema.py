"""
Table definitions and startup schema creation
"""

import logging
from typing import List

import aiosqlite

from testbank.models.enums import ServiceVariant

logger = logging.getLogger(__name__)

CATEGORIZED_TESTS_TABLE = """
    CREATE TABLE IF NOT EXISTS tests (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        topic TEXT NOT NULL,
        section TEXT NOT NULL,
        question TEXT NOT NULL,
        answer TEXT NOT NULL,
        createdAt DATETIME DEFAULT CURRENT_TIMESTAMP
    )
"""

BASIC_TESTS_TABLE = """
    CREATE TABLE IF NOT EXISTS tests (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        question TEXT NOT NULL,
        answer TEXT NOT NULL,
        createdAt DATETIME DEFAULT CURRENT_TIMESTAMP
    )
"""

# Distinct topics and sections for autocomplete
METADATA_TABLE = """
    CREATE TABLE IF NOT EXISTS metadata (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        type TEXT NOT NULL,
        value TEXT NOT NULL,
        UNIQUE(type, value)
    )
"""


def schema_statements(variant: ServiceVariant) -> List[str]:
    """DDL required by the given variant, in creation order"""
    if not variant.is_categorized:
        return [BASIC_TESTS_TABLE]

    statements = [CATEGORIZED_TESTS_TABLE]
    if variant.has_metadata_index:
        statements.append(METADATA_TABLE)
    return statements


async def ensure_schema(db: aiosqlite.Connection, variant: ServiceVariant) -> None:
    """
    Create the variant's tables if they are missing.

    Existing tables are never dropped or altered, so this is safe to run on
    every startup. Errors propagate to the caller.
    """
    try:
        for statement in schema_statements(variant):
            await db.execute(statement)
        await db.commit()
    except aiosqlite.Error as e:
        logger.error(f"Schema creation failed for variant '{variant.value}': {e}")
        raise

    logger.info(f"Schema ready for variant: {variant.value}")
