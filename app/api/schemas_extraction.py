from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.db.models import DocumentType, ExtractionRecord
from app.extraction.dispatch import parse_extracted


class ExtractionRecordResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    document_type: DocumentType
    page_number: int
    extracted_data: Dict[str, Any]
    image_url: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: ExtractionRecord) -> "ExtractionRecordResponse":
        """Serialise a stored record, typing its payload through the page variant."""
        fields = parse_extracted(record.document_type, record.page_number, record.extracted_data)
        response = cls.model_validate(record, from_attributes=True)
        response.extracted_data = fields.model_dump(by_alias=True)
        return response


class ExtractionResponse(BaseModel):
    message: str = "Image extracted and stored successfully"
    data: Dict[str, Any]
    id: str


class ExtractionListResponse(BaseModel):
    message: str = "Data retrieved successfully"
    count: int
    data: List[ExtractionRecordResponse]


class ExtractionDetailResponse(BaseModel):
    message: str = "Data retrieved successfully"
    data: ExtractionRecordResponse
