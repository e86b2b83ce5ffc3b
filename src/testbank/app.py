"""
Test Record Service API
Stores question/answer tests in SQLite with topic/section autocomplete support
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from testbank.config.settings import Settings, get_settings
from testbank.database.connection import init_database, close_database
from testbank.api.routes import health, tests, basic_tests, catalog
from testbank.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the configured variant"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database once and share it with every request"""
        app.state.db = await init_database(settings.database_path, settings.variant)
        try:
            yield
        finally:
            await close_database(app.state.db)

    app = FastAPI(
        title="Test Record Service",
        description="Question/answer test storage with topic and section autocomplete",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])

    variant = settings.variant
    if variant.is_categorized:
        app.include_router(tests.router, prefix="/api/tests", tags=["Tests"])
        app.include_router(catalog.router, prefix="/api", tags=["Autocomplete"])
    else:
        app.include_router(basic_tests.router, prefix="/api/tests", tags=["Tests"])

    if variant.has_metadata_index:
        app.include_router(catalog.metadata_router, prefix="/api", tags=["Autocomplete"])

    logger.info(f"Application configured for variant: {variant.value}")
    return app
