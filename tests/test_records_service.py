"""
Record store operations against a real SQLite file
"""

import asyncio
from datetime import datetime, timedelta

import pytest

from testbank.models.enums import ServiceVariant
from testbank.services.records_service import RecordsService


async def _seed(service, *records):
    ids = []
    for topic, section, question, answer in records:
        result = await service.create_record(question=question, answer=answer, topic=topic, section=section)
        assert result.success, result.error
        ids.append(result.data[0]["id"])
    return ids


class TestCreateAndList:

    @pytest.mark.asyncio
    async def test_create_returns_positive_id_and_lists_record(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)

        result = await service.create_record(question="Q1", answer="A1", topic="Bio", section="Cells")

        assert result.success
        record_id = result.data[0]["id"]
        assert isinstance(record_id, int) and record_id > 0

        listed = await service.list_records()
        assert listed.success
        assert len(listed.data) == 1
        row = listed.data[0]
        assert row["id"] == record_id
        assert (row["topic"], row["section"], row["question"], row["answer"]) == ("Bio", "Cells", "Q1", "A1")
        assert isinstance(row["createdAt"], datetime)
        assert row["createdAt"].utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_failed_create_does_not_discard_concurrent_create(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)

        good, bad = await asyncio.gather(
            service.create_record(question="Q", answer="A", topic="Math", section="Algebra"),
            service.create_record(question="Q", answer=None, topic="Math", section="Algebra"),
        )

        assert good.success
        assert not bad.success
        assert "NOT NULL constraint failed: tests.answer" in bad.error
        listed = await service.list_records()
        assert [row["id"] for row in listed.data] == [good.data[0]["id"]]

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)
        a, b, c = await _seed(
            service,
            ("T", "S", "A", "a"),
            ("T", "S", "B", "b"),
            ("T", "S", "C", "c"),
        )

        listed = await service.list_records()

        assert [row["id"] for row in listed.data] == [c, b, a]

    @pytest.mark.asyncio
    async def test_empty_store_lists_nothing(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)

        listed = await service.list_records()

        assert listed.success
        assert listed.data == []

    @pytest.mark.asyncio
    async def test_missing_field_is_storage_failure(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)

        result = await service.create_record(question="Q", answer="A", topic=None, section="S")

        assert not result.success
        assert result.error_type == "DATABASE_ERROR"
        assert "NOT NULL constraint failed" in result.error

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)
        (first,) = await _seed(service, ("T", "S", "Q", "A"))
        await service.delete_record(first)

        (second,) = await _seed(service, ("T", "S", "Q", "A"))

        assert second > first


class TestFiltering:

    @pytest.mark.asyncio
    async def test_filters_combine_with_and(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)
        algebra, geometry, _ = await _seed(
            service,
            ("Math", "Algebra", "Q1", "A1"),
            ("Math", "Geometry", "Q2", "A2"),
            ("Bio", "Algebra", "Q3", "A3"),
        )

        both = await service.list_records(topic="Math", section="Algebra")
        topic_only = await service.list_records(topic="Math")

        assert [row["id"] for row in both.data] == [algebra]
        assert [row["id"] for row in topic_only.data] == [geometry, algebra]

    @pytest.mark.asyncio
    async def test_empty_filters_are_ignored(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)
        await _seed(service, ("Math", "Algebra", "Q1", "A1"), ("Bio", "Cells", "Q2", "A2"))

        result = await service.list_records(topic="", section="")

        assert result.count == 2

    @pytest.mark.asyncio
    async def test_distinct_topics_sorted(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)
        await _seed(
            service,
            ("Physics", "Optics", "Q", "A"),
            ("Bio", "Cells", "Q", "A"),
            ("Physics", "Mechanics", "Q", "A"),
        )

        result = await service.list_topics()

        assert [row["topic"] for row in result.data] == ["Bio", "Physics"]

    @pytest.mark.asyncio
    async def test_distinct_sections_optionally_by_topic(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)
        await _seed(
            service,
            ("Physics", "Optics", "Q", "A"),
            ("Bio", "Cells", "Q", "A"),
            ("Physics", "Mechanics", "Q", "A"),
            ("Physics", "Optics", "Q", "A"),
        )

        every = await service.list_sections()
        physics = await service.list_sections("Physics")

        assert [row["section"] for row in every.data] == ["Cells", "Mechanics", "Optics"]
        assert [row["section"] for row in physics.data] == ["Mechanics", "Optics"]


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_twice_is_success_then_not_found(self, categorized_db):
        service = RecordsService(categorized_db, ServiceVariant.CATEGORIZED)
        (record_id,) = await _seed(service, ("T", "S", "Q", "A"))

        first = await service.delete_record(record_id)
        second = await service.delete_record(record_id)

        assert first.success
        assert not second.success
        assert second.error_type == "RESOURCE_NOT_FOUND"
        assert second.error == "Test not found"
        assert (await service.list_records()).data == []

    @pytest.mark.asyncio
    async def test_basic_variant_uses_affected_rows(self, basic_db):
        service = RecordsService(basic_db, ServiceVariant.BASIC)
        created = await service.create_record(question="Q", answer="A")
        record_id = created.data[0]["id"]

        first = await service.delete_record(record_id)
        second = await service.delete_record(record_id)

        assert first.success and first.count == 1
        assert second.error_type == "RESOURCE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_basic_variant_records_have_no_categories(self, basic_db):
        service = RecordsService(basic_db, ServiceVariant.BASIC)
        await service.create_record(question="Q", answer="A", topic="ignored", section="ignored")

        listed = await service.list_records()

        assert set(listed.data[0]) == {"id", "question", "answer", "createdAt"}
