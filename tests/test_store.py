"""Tests for the extraction record store against in-memory SQLite."""

from app.db.models import DocumentType
from app.db.store import get_record, insert_record, list_records
from tests.factories import make_record, ts


async def _seed(session):
    records = [
        make_record(DocumentType.PASSPORT, 1, created_at=ts(1)),
        make_record(DocumentType.AADHAAR, 2, created_at=ts(2)),
        make_record(DocumentType.PASSPORT, 2, created_at=ts(3)),
        make_record(DocumentType.AADHAAR, 1, created_at=ts(4)),
    ]
    session.add_all(records)
    await session.commit()
    return records


async def test_insert_assigns_id_and_timestamp(session):
    record = await insert_record(
        session,
        document_type=DocumentType.PAN_CARD,
        page_number=1,
        extracted_data={"panNumber": "ABCDE1234F", "name": "Ravi"},
        image_url="data:image/png;base64,AAAA",
    )
    assert record.id
    assert record.created_at is not None

    fetched = await get_record(session, record.id)
    assert fetched is not None
    assert fetched.document_type is DocumentType.PAN_CARD
    assert fetched.extracted_data == {"panNumber": "ABCDE1234F", "name": "Ravi"}


async def test_list_newest_first(session):
    await _seed(session)
    records = await list_records(session)
    assert [(r.document_type, r.page_number) for r in records] == [
        (DocumentType.AADHAAR, 1),
        (DocumentType.PASSPORT, 2),
        (DocumentType.AADHAAR, 2),
        (DocumentType.PASSPORT, 1),
    ]


async def test_list_filter_by_document_type(session):
    await _seed(session)
    records = await list_records(session, document_type="passport")
    assert len(records) == 2
    assert all(r.document_type is DocumentType.PASSPORT for r in records)


async def test_list_filters_are_conjunctive(session):
    await _seed(session)
    records = await list_records(session, document_type="aadhaar", page_number=2)
    assert len(records) == 1
    assert records[0].document_type is DocumentType.AADHAAR
    assert records[0].page_number == 2


async def test_list_unknown_document_type_is_empty(session):
    await _seed(session)
    assert list(await list_records(session, document_type="driving-licence")) == []


async def test_get_missing_record(session):
    assert await get_record(session, "does-not-exist") is None
