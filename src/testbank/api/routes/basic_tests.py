"""
Test record API routes for the basic variant (question + answer only)
"""

from typing import List, Optional
from fastapi import APIRouter, Body, Depends

from testbank.models.test_record import (
    BasicRecordCreateRequest,
    BasicRecordResponse,
    RecordCreatedResponse,
    DeleteResponse
)
from testbank.services.records_service import RecordsService, get_records_service
from testbank.utils.error_handling import raise_for_service_error

router = APIRouter()

@router.post("", response_model=RecordCreatedResponse)
async def create_test(
    request: Optional[BasicRecordCreateRequest] = Body(None),
    records_service: RecordsService = Depends(get_records_service)
):
    """Save a question/answer pair"""
    if request is None:
        request = BasicRecordCreateRequest()
    result = await records_service.create_record(
        question=request.question,
        answer=request.answer
    )
    raise_for_service_error(result)

    return RecordCreatedResponse(id=result.data[0]["id"])

@router.get("", response_model=List[BasicRecordResponse])
async def list_tests(
    records_service: RecordsService = Depends(get_records_service)
):
    result = await records_service.list_records()
    raise_for_service_error(result)

    return [BasicRecordResponse(**row) for row in result.data]

@router.delete("/{test_id}", response_model=DeleteResponse)
async def delete_test(
    test_id: int,
    records_service: RecordsService = Depends(get_records_service)
):
    result = await records_service.delete_record(test_id)
    raise_for_service_error(result)

    return DeleteResponse(success=True)
