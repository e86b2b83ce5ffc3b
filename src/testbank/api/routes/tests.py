"""
Test record API routes for the categorized variants (topic + section)
"""

from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query

from testbank.models.test_record import (
    RecordCreateRequest,
    RecordCreatedResponse,
    RecordResponse,
    DeleteResponse
)
from testbank.services.records_service import RecordsService, get_records_service
from testbank.utils.error_handling import raise_for_service_error

router = APIRouter()

@router.post("", response_model=RecordCreatedResponse)
async def create_test(
    request: Optional[RecordCreateRequest] = Body(None),
    records_service: RecordsService = Depends(get_records_service)
):
    """Save a test and register its topic and section for autocomplete"""
    # An absent body behaves like {} and fails the NOT NULL checks
    if request is None:
        request = RecordCreateRequest()
    result = await records_service.create_record(
        question=request.question,
        answer=request.answer,
        topic=request.topic,
        section=request.section
    )
    raise_for_service_error(result)

    return RecordCreatedResponse(id=result.data[0]["id"])

@router.get("", response_model=List[RecordResponse])
async def list_tests(
    records_service: RecordsService = Depends(get_records_service)
):
    """List all tests, newest first"""
    result = await records_service.list_records()
    raise_for_service_error(result)

    return [RecordResponse(**row) for row in result.data]

@router.get("/filtered", response_model=List[RecordResponse])
async def list_filtered_tests(
    topic: Optional[str] = Query(None, description="Exact topic match"),
    section: Optional[str] = Query(None, description="Exact section match"),
    records_service: RecordsService = Depends(get_records_service)
):
    """List tests matching every supplied filter, newest first"""
    result = await records_service.list_records(topic=topic, section=section)
    raise_for_service_error(result)

    return [RecordResponse(**row) for row in result.data]

@router.delete("/{test_id}", response_model=DeleteResponse)
async def delete_test(
    test_id: int,
    records_service: RecordsService = Depends(get_records_service)
):
    """Delete a test; unused topics and sections leave the metadata index"""
    result = await records_service.delete_record(test_id)
    raise_for_service_error(result)

    return DeleteResponse(success=True)
