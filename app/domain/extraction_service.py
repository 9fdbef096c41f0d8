from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DependencyError, MissingImageError
from app.db.models import DocumentType, ExtractionRecord
from app.db.store import insert_record
from app.extraction.dispatch import PROFILES, parse_page_number, resolve
from app.extraction.engine import AgentRunner, build_data_url

logger = logging.getLogger(__name__)

PROCESS_FAILED = "Failed to process image"


@dataclass(frozen=True)
class ExtractionOutcome:
    record: ExtractionRecord
    data: Dict[str, Any]


async def extract_document(
    session: AsyncSession,
    *,
    runner: AgentRunner,
    document_type: DocumentType,
    page_number: Any,
    image: bytes | None,
    media_type: str | None,
) -> ExtractionOutcome:
    """
    Validate -> Dispatch -> Invoke Agent -> Persist.
    Client errors are raised before the agent is called; nothing is stored
    unless the agent returned a result.
    """
    # 1) VALIDATE
    if not image:
        raise MissingImageError()

    profile = PROFILES[document_type]
    page = parse_page_number(page_number) if profile.paged else 1

    # 2) DISPATCH
    resolution = resolve(document_type, page)
    data_url = build_data_url(image, media_type)

    # 3) INVOKE AGENT
    try:
        output = await runner.run(
            agent_name=profile.agent_name,
            instructions=resolution.instructions,
            output_type=resolution.schema,
            directive=profile.directive,
            image_data_url=data_url,
        )
    except Exception as e:
        logger.error("agent call failed for %s page %s: %s", document_type.value, page, e)
        raise DependencyError(PROCESS_FAILED, str(e)) from e

    data = output.model_dump(by_alias=True)

    # 4) PERSIST
    try:
        record = await insert_record(
            session,
            document_type=document_type,
            page_number=page,
            extracted_data=data,
            image_url=data_url,
        )
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error("failed to store extraction for %s page %s: %s", document_type.value, page, e)
        raise DependencyError(PROCESS_FAILED, str(e)) from e

    logger.info("stored %s page %s extraction as %s", document_type.value, page, record.id)
    return ExtractionOutcome(record=record, data=data)
