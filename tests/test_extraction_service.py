"""Unit tests for the extract_document pipeline."""

import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import DependencyError, MissingImageError, UnsupportedCombinationError
from app.db.models import DocumentType
from app.db.store import list_records
from app.domain import extraction_service
from app.domain.extraction_service import extract_document
from tests.factories import PNG_BYTES, FakeAgentRunner


async def test_returns_record_and_alias_keyed_data(session):
    runner = FakeAgentRunner(result={"aadhaarNumber": "1234 5678 9012", "name": "Asha"})

    outcome = await extract_document(
        session,
        runner=runner,
        document_type=DocumentType.AADHAAR,
        page_number="1",
        image=PNG_BYTES,
        media_type="image/png",
    )

    assert outcome.data == {"aadhaarNumber": "1234 5678 9012", "name": "Asha"}
    assert outcome.record.extracted_data == outcome.data
    assert outcome.record.page_number == 1


async def test_pan_card_ignores_page_number(session):
    outcome = await extract_document(
        session,
        runner=FakeAgentRunner(),
        document_type=DocumentType.PAN_CARD,
        page_number=None,
        image=PNG_BYTES,
        media_type="image/png",
    )
    assert outcome.record.page_number == 1


async def test_missing_image_checked_before_page(session):
    with pytest.raises(MissingImageError):
        await extract_document(
            session,
            runner=FakeAgentRunner(),
            document_type=DocumentType.PASSPORT,
            page_number="abc",
            image=None,
            media_type=None,
        )


async def test_unsupported_page_skips_agent(session):
    runner = FakeAgentRunner()
    with pytest.raises(UnsupportedCombinationError):
        await extract_document(
            session,
            runner=runner,
            document_type=DocumentType.PASSPORT,
            page_number="3",
            image=PNG_BYTES,
            media_type="image/png",
        )
    assert runner.calls == []


async def test_store_failure_is_dependency_error(session, monkeypatch):
    async def _fail(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(extraction_service, "insert_record", _fail)

    with pytest.raises(DependencyError) as exc:
        await extract_document(
            session,
            runner=FakeAgentRunner(),
            document_type=DocumentType.PASSPORT,
            page_number="2",
            image=PNG_BYTES,
            media_type="image/png",
        )
    assert exc.value.error == "Failed to process image"
    assert "disk I/O error" in exc.value.detail
    assert list(await list_records(session)) == []
