"""
Records service - business logic for stored question/answer tests
"""

import logging
from typing import Optional

import aiosqlite
from fastapi import Depends, Request

from testbank.database.connection import get_database
from testbank.models.enums import ServiceVariant
from testbank.services.base_service import BaseService, ServiceResult
from testbank.services.metadata_service import MetadataService
from testbank.utils.helpers import clean_filters, parse_db_timestamp

logger = logging.getLogger(__name__)

class RecordsService(BaseService):
    """Service for test record operations"""

    def __init__(self, db: aiosqlite.Connection, variant: ServiceVariant = ServiceVariant.METADATA):
        super().__init__(db, "tests")
        self.variant = variant
        self.metadata = MetadataService(db) if variant.has_metadata_index else None

    async def create_record(
        self,
        question: Optional[str],
        answer: Optional[str],
        topic: Optional[str] = None,
        section: Optional[str] = None
    ) -> ServiceResult:
        """
        Create a new test record

        Missing values are passed through as NULL and rejected by the schema.
        When the metadata index is enabled, the record's topic and section are
        added to it afterwards; failures there are logged and ignored.

        Returns:
            ServiceResult with the new record id
        """
        if self.variant.is_categorized:
            result = await self._execute(
                "INSERT INTO tests (topic, section, question, answer) VALUES (?, ?, ?, ?)",
                [topic, section, question, answer]
            )
        else:
            result = await self._execute(
                "INSERT INTO tests (question, answer) VALUES (?, ?)",
                [question, answer]
            )

        if not result.success:
            return result

        record_id = result.data[0]["id"]
        logger.info(f"Created test {record_id}")

        if self.metadata is not None:
            metadata_result = await self.metadata.record_values(topic, section)
            if not metadata_result.success:
                logger.error(f"Error saving metadata: {metadata_result.error}")

        return ServiceResult(success=True, data=[{"id": record_id}], count=1)

    async def list_records(
        self,
        topic: Optional[str] = None,
        section: Optional[str] = None
    ) -> ServiceResult:
        """
        List records newest first, optionally filtered

        Args:
            topic: Exact topic to match (ignored when empty)
            section: Exact section to match (ignored when empty)

        Returns:
            ServiceResult with matching records
        """
        filters = clean_filters(topic=topic, section=section)

        query = "SELECT * FROM tests"
        params = []
        if filters:
            # Filter names are fixed keyword arguments, never client input
            query += " WHERE " + " AND ".join(f"{name} = ?" for name in filters)
            params.extend(filters.values())
        # Timestamps have one-second resolution; id keeps insertion order
        query += " ORDER BY createdAt DESC, id DESC"

        result = await self._fetch_all(query, params)
        if result.success:
            for row in result.data:
                row["createdAt"] = parse_db_timestamp(row.get("createdAt"))
        return result

    async def list_topics(self) -> ServiceResult:
        """Distinct topics across all records, sorted"""
        return await self._fetch_all("SELECT DISTINCT topic FROM tests ORDER BY topic")

    async def list_sections(self, topic: Optional[str] = None) -> ServiceResult:
        """Distinct sections, optionally only those used under a topic"""
        query = "SELECT DISTINCT section FROM tests"
        params = []
        if topic:
            query += " WHERE topic = ?"
            params.append(topic)
        query += " ORDER BY section"

        return await self._fetch_all(query, params)

    async def get_record(self, record_id: int) -> ServiceResult:
        """Get a single record by id; empty data when absent"""
        return await self._fetch_one("SELECT * FROM tests WHERE id = ?", [record_id])

    async def delete_record(self, record_id: int) -> ServiceResult:
        """
        Delete a record by id

        Categorized variants look the record up first and, with the metadata
        index enabled, prune topic/section entries that are no longer used.
        The basic variant reports not-found from the affected row count.
        Steps run in order and the first failure is returned.
        """
        if not self.variant.is_categorized:
            result = await self._execute("DELETE FROM tests WHERE id = ?", [record_id])
            if result.success and result.count == 0:
                return ServiceResult.not_found("Test not found")
            if result.success:
                logger.info(f"Deleted test {record_id}")
            return result

        lookup = await self.get_record(record_id)
        if not lookup.success:
            return lookup
        if not lookup.data:
            return ServiceResult.not_found("Test not found")

        existing = lookup.data[0]

        result = await self._execute("DELETE FROM tests WHERE id = ?", [record_id])
        if not result.success:
            return result
        logger.info(f"Deleted test {record_id}")

        if self.metadata is not None:
            # Not atomic with the delete above
            prune_result = await self.metadata.prune_values(existing["topic"], existing["section"])
            if not prune_result.success:
                return prune_result

        return ServiceResult(success=True, data=[existing], count=1)


def get_records_service(
    request: Request,
    db: aiosqlite.Connection = Depends(get_database)
) -> RecordsService:
    """FastAPI dependency building the service for the configured variant"""
    return RecordsService(db, request.app.state.settings.variant)