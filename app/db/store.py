from __future__ import annotations

from typing import Any, Dict, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import DocumentType, ExtractionRecord

async def insert_record(
    session: AsyncSession,
    *,
    document_type: DocumentType,
    page_number: int,
    extracted_data: Dict[str, Any],
    image_url: str,
) -> ExtractionRecord:
    record = ExtractionRecord(
        document_type=document_type,
        page_number=page_number,
        extracted_data=extracted_data,
        image_url=image_url,
    )
    session.add(record)
    await session.commit()
    await session.refresh(record)
    return record

async def list_records(
    session: AsyncSession,
    *,
    document_type: str | None = None,
    page_number: int | None = None,
) -> Sequence[ExtractionRecord]:
    stmt = select(ExtractionRecord)
    if document_type:
        try:
            doc_type = DocumentType(document_type)
        except ValueError:
            # unknown type filters everything out
            return []
        stmt = stmt.where(ExtractionRecord.document_type == doc_type)
    if page_number is not None:
        stmt = stmt.where(ExtractionRecord.page_number == page_number)

    res = await session.execute(stmt.order_by(ExtractionRecord.created_at.desc()))
    return res.scalars().all()

async def get_record(session: AsyncSession, record_id: str) -> ExtractionRecord | None:
    res = await session.execute(select(ExtractionRecord).where(ExtractionRecord.id == record_id))
    return res.scalar_one_or_none()
