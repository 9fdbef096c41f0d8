from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas_extraction import ExtractionResponse
from app.db.models import DocumentType
from app.db.session import get_session
from app.domain.extraction_service import extract_document
from app.extraction.engine import AgentRunner, get_agent_runner


router = APIRouter(prefix="/api/extract", tags=["extract"])


async def _handle(
    *,
    document_type: DocumentType,
    page_number: Optional[str],
    image: Optional[UploadFile],
    session: AsyncSession,
    runner: AgentRunner,
) -> ExtractionResponse:
    payload = await image.read() if image is not None else None
    media_type = image.content_type if image is not None else None

    outcome = await extract_document(
        session,
        runner=runner,
        document_type=document_type,
        page_number=page_number,
        image=payload,
        media_type=media_type,
    )
    return ExtractionResponse(data=outcome.data, id=outcome.record.id)


@router.post("/passport/{page_number}", response_model=ExtractionResponse)
async def extract_passport(
    page_number: str,
    image: Optional[UploadFile] = File(default=None),
    session: AsyncSession = Depends(get_session),
    runner: AgentRunner = Depends(get_agent_runner),
):
    return await _handle(
        document_type=DocumentType.PASSPORT,
        page_number=page_number,
        image=image,
        session=session,
        runner=runner,
    )


@router.post("/aadhaar/{page_number}", response_model=ExtractionResponse)
async def extract_aadhaar(
    page_number: str,
    image: Optional[UploadFile] = File(default=None),
    session: AsyncSession = Depends(get_session),
    runner: AgentRunner = Depends(get_agent_runner),
):
    return await _handle(
        document_type=DocumentType.AADHAAR,
        page_number=page_number,
        image=image,
        session=session,
        runner=runner,
    )


@router.post("/pan-card", response_model=ExtractionResponse)
async def extract_pan_card(
    image: Optional[UploadFile] = File(default=None),
    session: AsyncSession = Depends(get_session),
    runner: AgentRunner = Depends(get_agent_runner),
):
    return await _handle(
        document_type=DocumentType.PAN_CARD,
        page_number=None,
        image=image,
        session=session,
        runner=runner,
    )
