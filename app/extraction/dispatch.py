from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Type

from pydantic import BaseModel

from app.core.errors import MissingPageNumberError, UnsupportedCombinationError
from app.db.models import DocumentType
from app.extraction.instructions import INSTRUCTION_REGISTRY, instructions_for
from app.extraction.schemas import SCHEMA_REGISTRY, schema_for


@dataclass(frozen=True)
class DocumentProfile:
    document_type: DocumentType
    agent_name: str
    # used in client messages: "Invalid page number for <label>."
    label: str
    # used in the directive: "Extract all available <subject> information ..."
    subject: str
    paged: bool

    @property
    def page_count(self) -> int:
        return len(SCHEMA_REGISTRY[self.document_type])

    @property
    def directive(self) -> str:
        return (
            f"Extract all available {self.subject} information from this image. "
            "Return only JSON with no additional text."
        )


@dataclass(frozen=True)
class Resolution:
    profile: DocumentProfile
    page_number: int
    instructions: str
    schema: Type[BaseModel]


PROFILES: Mapping[DocumentType, DocumentProfile] = MappingProxyType({
    DocumentType.PASSPORT: DocumentProfile(
        document_type=DocumentType.PASSPORT,
        agent_name="Passport Extraction Agent",
        label="passport",
        subject="passport",
        paged=True,
    ),
    DocumentType.AADHAAR: DocumentProfile(
        document_type=DocumentType.AADHAAR,
        agent_name="Aadhaar Extraction Agent",
        label="aadhaar",
        subject="aadhaar",
        paged=True,
    ),
    DocumentType.PAN_CARD: DocumentProfile(
        document_type=DocumentType.PAN_CARD,
        agent_name="PAN Card Extraction Agent",
        label="pan card",
        subject="PAN card",
        paged=False,
    ),
})


def _check_registries_aligned() -> None:
    for doc_type in DocumentType:
        schema_pages = set(SCHEMA_REGISTRY.get(doc_type, {}))
        instruction_pages = set(INSTRUCTION_REGISTRY.get(doc_type, {}))
        if schema_pages != instruction_pages:
            raise RuntimeError(
                f"registries out of sync for {doc_type.value}: "
                f"schemas={sorted(schema_pages)} instructions={sorted(instruction_pages)}"
            )
        if doc_type not in PROFILES:
            raise RuntimeError(f"no profile for {doc_type.value}")


_check_registries_aligned()


def parse_page_number(raw: Any) -> int:
    """
    Parse a page number from a path segment or query value.
    Empty, non-numeric, zero and negative values are all "missing";
    range checks against the document belong to resolve().
    """
    if raw is None:
        raise MissingPageNumberError()
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        text = str(raw).strip()
        if not (text.isascii() and text.isdigit()):
            raise MissingPageNumberError()
        value = int(text)
    if value <= 0:
        raise MissingPageNumberError()
    return value


def resolve(document_type: DocumentType, page_number: int) -> Resolution:
    profile = PROFILES[document_type]

    instructions = instructions_for(document_type, page_number)
    schema = schema_for(document_type, page_number)
    if instructions is None or schema is None:
        raise UnsupportedCombinationError(profile.label, page_number)

    return Resolution(
        profile=profile,
        page_number=page_number,
        instructions=instructions,
        schema=schema,
    )


def parse_extracted(document_type: DocumentType, page_number: int, data: Dict[str, Any]) -> BaseModel:
    """Validate a stored field mapping back into its (document type, page) variant."""
    return resolve(document_type, page_number).schema.model_validate(data)
