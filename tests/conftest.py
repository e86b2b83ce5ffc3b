"""
pytest configuration and fixtures for the Test Record Service
Every test gets its own SQLite file under tmp_path.
"""

import sqlite3

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from testbank.app import create_app
from testbank.config.settings import Settings
from testbank.database.connection import init_database, close_database
from testbank.models.enums import ServiceVariant


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test.db")


@pytest.fixture
def run_sql(db_path):
    """Execute raw SQL against the database file from outside the app"""
    def _run(statement, params=()):
        conn = sqlite3.connect(db_path)
        try:
            rows = conn.execute(statement, params).fetchall()
            conn.commit()
            return rows
        finally:
            conn.close()
    return _run


# === SERVICE LAYER ===

@pytest_asyncio.fixture
async def metadata_db(db_path):
    db = await init_database(db_path, ServiceVariant.METADATA)
    yield db
    await close_database(db)


@pytest_asyncio.fixture
async def categorized_db(db_path):
    db = await init_database(db_path, ServiceVariant.CATEGORIZED)
    yield db
    await close_database(db)


@pytest_asyncio.fixture
async def basic_db(db_path):
    db = await init_database(db_path, ServiceVariant.BASIC)
    yield db
    await close_database(db)


# === HTTP LAYER ===

def _client(db_path, variant):
    settings = Settings(database_path=db_path, variant=variant, allowed_origins=["*"])
    return TestClient(create_app(settings))


@pytest.fixture
def metadata_client(db_path):
    with _client(db_path, ServiceVariant.METADATA) as client:
        yield client


@pytest.fixture
def categorized_client(db_path):
    with _client(db_path, ServiceVariant.CATEGORIZED) as client:
        yield client


@pytest.fixture
def basic_client(db_path):
    with _client(db_path, ServiceVariant.BASIC) as client:
        yield client
