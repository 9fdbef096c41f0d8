from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.db.models import DocumentType


class _DocumentFields(BaseModel):
    # camelCase on the wire: agent output, stored payloads and API responses
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# -----------------------
# Passport
# -----------------------

class PassportFrontPage(_DocumentFields):
    passport_number: str = Field(description="passport number")
    first_name: str = Field(description="first name")
    last_name: str = Field(description="last name")
    date_of_birth: str = Field(description="date of birth")
    passport_issued_date: str = Field(description="passport issued date")
    passport_expiry_date: str = Field(description="passport expiry date")
    passport_issued_country: str = Field(description="passport issued country")
    passport_issued_state: str = Field(description="passport issued state")
    gender: str = Field(description="gender")
    nationality: str = Field(description="nationality")
    phone_number: str = Field(description="phone number")
    place_of_birth: str = Field(description="place of birth")


class PassportBackPage(_DocumentFields):
    father_name: str = Field(description="father's name")
    mother_name: str = Field(description="mother's name")
    address: str = Field(description="address")


# -----------------------
# Aadhaar
# -----------------------

class AadhaarFirstPage(_DocumentFields):
    aadhaar_number: str = Field(description="aadhaar number")
    name: str = Field(description="name as per Aadhaar Card")


class AadhaarSecondPage(_DocumentFields):
    address: str = Field(description="address")


# -----------------------
# PAN card
# -----------------------

class PanCard(_DocumentFields):
    pan_number: str = Field(description="PAN number")
    name: str = Field(description="name as per PAN Card")


SCHEMA_REGISTRY: Mapping[DocumentType, Mapping[int, Type[_DocumentFields]]] = MappingProxyType({
    DocumentType.PASSPORT: MappingProxyType({1: PassportFrontPage, 2: PassportBackPage}),
    DocumentType.AADHAAR: MappingProxyType({1: AadhaarFirstPage, 2: AadhaarSecondPage}),
    DocumentType.PAN_CARD: MappingProxyType({1: PanCard}),
})


def schema_for(document_type: DocumentType, page_number: int) -> Type[_DocumentFields] | None:
    return SCHEMA_REGISTRY.get(document_type, {}).get(page_number)
