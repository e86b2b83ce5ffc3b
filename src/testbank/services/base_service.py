"""
Base service layer for database operations
"""

import logging
from typing import Dict, Any, List, Optional, Sequence
from dataclasses import dataclass

import aiosqlite

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult":
        return cls(success=False, error=message, error_type="RESOURCE_NOT_FOUND")

    @classmethod
    def database_error(cls, error: Exception) -> "ServiceResult":
        # Raw engine message is what clients receive
        return cls(success=False, error=str(error), error_type="DATABASE_ERROR")


class BaseService:
    """Wraps a shared aiosqlite connection with result-returning helpers"""

    def __init__(self, db: aiosqlite.Connection, resource_name: str):
        self.db = db
        self.resource_name = resource_name

    async def _fetch_all(self, query: str, params: Sequence[Any] = ()) -> ServiceResult:
        """Run a SELECT and return every row as a dict"""
        try:
            async with self.db.execute(query, tuple(params)) as cursor:
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            logger.error(f"Read operation failed for {self.resource_name}: {e}")
            return ServiceResult.database_error(e)

        data = [dict(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def _fetch_one(self, query: str, params: Sequence[Any] = ()) -> ServiceResult:
        """Run a SELECT expected to yield at most one row"""
        try:
            async with self.db.execute(query, tuple(params)) as cursor:
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            logger.error(f"Read operation failed for {self.resource_name}: {e}")
            return ServiceResult.database_error(e)

        if row is None:
            return ServiceResult(success=True, data=[], count=0)
        return ServiceResult(success=True, data=[dict(row)], count=1)

    async def _execute(self, query: str, params: Sequence[Any] = ()) -> ServiceResult:
        """
        Run a single write statement

        The connection autocommits, so a failing statement leaves no pending
        work behind and never affects writes made by other requests.

        Returns:
            ServiceResult whose data holds the last inserted row id and whose
            count is the number of affected rows
        """
        try:
            async with self.db.execute(query, tuple(params)) as cursor:
                last_id = cursor.lastrowid
                affected = cursor.rowcount
        except aiosqlite.Error as e:
            logger.error(f"Write operation failed for {self.resource_name}: {e}")
            return ServiceResult.database_error(e)

        return ServiceResult(success=True, data=[{"id": last_id}], count=affected)
