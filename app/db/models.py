from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Enum, Integer, JSON, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base

class DocumentType(str, enum.Enum):
    PASSPORT = "passport"
    AADHAAR = "aadhaar"
    PAN_CARD = "pan-card"


class ExtractionRecord(Base):
    __tablename__ = "extracted_data"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))  # UUID string

    # values_callable stores "pan-card", not the member name
    document_type: Mapped[DocumentType] = mapped_column(
        Enum(DocumentType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    page_number: Mapped[int] = mapped_column(Integer, nullable=False)

    extracted_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    # data:<media type>;base64,<payload>
    image_url: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), nullable=False)
