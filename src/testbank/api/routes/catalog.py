"""
Distinct topic/section lookups used for autocomplete
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from testbank.models.metadata import MetadataResponse
from testbank.services.metadata_service import MetadataService, get_metadata_service
from testbank.services.records_service import RecordsService, get_records_service
from testbank.utils.error_handling import raise_for_service_error

router = APIRouter()

# Only mounted when the metadata index exists
metadata_router = APIRouter()

@router.get("/topics", response_model=List[str])
async def list_topics(
    records_service: RecordsService = Depends(get_records_service)
):
    """Distinct topics across stored tests"""
    result = await records_service.list_topics()
    raise_for_service_error(result)

    return [row["topic"] for row in result.data]

@router.get("/sections", response_model=List[str])
async def list_sections(
    topic: Optional[str] = Query(None, description="Only sections used under this topic"),
    records_service: RecordsService = Depends(get_records_service)
):
    """Distinct sections, optionally for one topic"""
    result = await records_service.list_sections(topic)
    raise_for_service_error(result)

    return [row["section"] for row in result.data]

@metadata_router.get("/metadata", response_model=MetadataResponse)
async def get_metadata(
    metadata_service: MetadataService = Depends(get_metadata_service)
):
    """Topics and sections from the metadata index"""
    result = await metadata_service.read_metadata()
    raise_for_service_error(result)

    return MetadataResponse(**result.data[0])
