"""
Metadata service - autocomplete index of distinct topics and sections
"""

import logging

import aiosqlite
from fastapi import Depends

from testbank.database.connection import get_database
from testbank.models.enums import MetadataType
from testbank.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

class MetadataService(BaseService):
    """
    Maintains the metadata table alongside record writes.

    Each (type, value) pair is present exactly while at least one record
    references the value.
    """

    def __init__(self, db: aiosqlite.Connection):
        super().__init__(db, "metadata")

    async def record_values(self, topic: str, section: str) -> ServiceResult:
        """Add the topic and section of a new record, ignoring duplicates"""
        return await self._execute(
            "INSERT OR IGNORE INTO metadata (type, value) VALUES (?, ?), (?, ?)",
            [MetadataType.TOPIC.value, topic, MetadataType.SECTION.value, section]
        )

    async def prune_values(self, topic: str, section: str) -> ServiceResult:
        """
        Drop topic/section entries no remaining record references

        The two checks are independent. The first failing step stops the
        pipeline and its result is returned.
        """
        for meta_type, value in ((MetadataType.TOPIC, topic), (MetadataType.SECTION, section)):
            result = await self._prune_value(meta_type, value)
            if not result.success:
                return result

        return ServiceResult(success=True)

    async def _prune_value(self, meta_type: MetadataType, value: str) -> ServiceResult:
        # Column name comes from the enum, never from input
        count_result = await self._fetch_one(
            f"SELECT COUNT(*) AS count FROM tests WHERE {meta_type.value} = ?",
            [value]
        )
        if not count_result.success:
            return count_result

        if count_result.data[0]["count"] > 0:
            return ServiceResult(success=True)

        logger.info(f"Removing {meta_type.value} '{value}' from metadata")
        return await self._execute(
            "DELETE FROM metadata WHERE type = ? AND value = ?",
            [meta_type.value, value]
        )

    async def read_metadata(self) -> ServiceResult:
        """
        Get all metadata entries partitioned by type

        Returns:
            ServiceResult whose single data item has sorted "topics" and
            "sections" lists
        """
        result = await self._fetch_all("SELECT type, value FROM metadata ORDER BY type, value")
        if not result.success:
            return result

        topics = [row["value"] for row in result.data if row["type"] == MetadataType.TOPIC.value]
        sections = [row["value"] for row in result.data if row["type"] == MetadataType.SECTION.value]

        return ServiceResult(
            success=True,
            data=[{"topics": topics, "sections": sections}],
            count=len(result.data)
        )


def get_metadata_service(db: aiosqlite.Connection = Depends(get_database)) -> MetadataService:
    """FastAPI dependency for the metadata index"""
    return MetadataService(db)
