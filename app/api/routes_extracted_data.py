from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas_extraction import (
    ExtractionDetailResponse,
    ExtractionListResponse,
    ExtractionRecordResponse,
)
from app.core.errors import DependencyError, MissingPageNumberError, RecordNotFoundError
from app.db.session import get_session
from app.db.store import get_record, list_records
from app.extraction.dispatch import parse_page_number


router = APIRouter(prefix="/api/extracted-data", tags=["extracted-data"])

RETRIEVE_FAILED = "Failed to retrieve data"


def _page_filter(raw: Optional[str]) -> Optional[int]:
    # empty, non-numeric and zero mean "no filter"
    try:
        return parse_page_number(raw)
    except MissingPageNumberError:
        return None


@router.get("", response_model=ExtractionListResponse)
async def list_extractions(
    document_type: Optional[str] = Query(default=None, alias="documentType"),
    page_number: Optional[str] = Query(default=None, alias="pageNumber"),
    session: AsyncSession = Depends(get_session),
):
    try:
        records = await list_records(
            session,
            document_type=document_type or None,
            page_number=_page_filter(page_number),
        )
    except SQLAlchemyError as e:
        raise DependencyError(RETRIEVE_FAILED, str(e)) from e

    return ExtractionListResponse(
        count=len(records),
        data=[ExtractionRecordResponse.from_record(r) for r in records],
    )


@router.get("/{record_id}", response_model=ExtractionDetailResponse)
async def get_extraction(record_id: str, session: AsyncSession = Depends(get_session)):
    try:
        record = await get_record(session, record_id)
    except SQLAlchemyError as e:
        raise DependencyError(RETRIEVE_FAILED, str(e)) from e

    if not record:
        raise RecordNotFoundError(record_id)
    return ExtractionDetailResponse(data=ExtractionRecordResponse.from_record(record))
