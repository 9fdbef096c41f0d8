from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from app.db.models import DocumentType


def _brief(*, subject: str, page: str, fields: Iterable[str]) -> str:
    bullets = "\n".join(f"- {f}" for f in fields)
    return (
        f"You are an expert at extracting information from {subject} images. "
        f"Analyze the provided {page} image and extract all available information.\n"
        f"Extract the following information from the {page} image:\n"
        f"{bullets}"
    )


PASSPORT_FRONT_PAGE = _brief(
    subject="passport",
    page="passport's front page",
    fields=(
        "Passport Number",
        "First Name",
        "Last Name",
        "Date of Birth",
        "Passport Issued Date",
        "Passport Expiry Date",
        "Passport Issued Country",
        "Passport Issued State",
        "Gender",
        "Nationality",
        "Phone Number",
        "Place of Birth",
    ),
)

PASSPORT_BACK_PAGE = _brief(
    subject="passport's back page",
    page="passport's back page",
    fields=("Father's Name", "Mother's Name", "Address"),
)

AADHAAR_FIRST_PAGE = _brief(
    subject="aadhaar",
    page="aadhaar's first page",
    fields=("Aadhaar Number", "Name as per Aadhaar Card"),
)

AADHAAR_SECOND_PAGE = _brief(
    subject="aadhaar's second page",
    page="aadhaar's second page",
    fields=("Address",),
)

PAN_CARD = _brief(
    subject="pan card",
    page="pan card",
    fields=("PAN Number", "Name as per PAN Card"),
)


INSTRUCTION_REGISTRY: Mapping[DocumentType, Mapping[int, str]] = MappingProxyType({
    DocumentType.PASSPORT: MappingProxyType({1: PASSPORT_FRONT_PAGE, 2: PASSPORT_BACK_PAGE}),
    DocumentType.AADHAAR: MappingProxyType({1: AADHAAR_FIRST_PAGE, 2: AADHAAR_SECOND_PAGE}),
    DocumentType.PAN_CARD: MappingProxyType({1: PAN_CARD}),
})


def instructions_for(document_type: DocumentType, page_number: int) -> str | None:
    return INSTRUCTION_REGISTRY.get(document_type, {}).get(page_number)
