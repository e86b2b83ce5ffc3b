"""
Health check API route
"""

from datetime import datetime, timezone

import aiosqlite
from fastapi import APIRouter, HTTPException, Depends, Request

from testbank.database.connection import get_database

router = APIRouter()

@router.get("/health")
async def health_check(
    request: Request,
    db: aiosqlite.Connection = Depends(get_database)
):
    """Report database connectivity and the active variant"""
    try:
        async with db.execute("SELECT 1") as cursor:
            await cursor.fetchone()
    except aiosqlite.Error as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
        "variant": request.app.state.settings.variant.value
    }
