import pytest

from servicedir.core.errors import UpstreamFailure, ValidationFailure
from servicedir.db import mongo
from servicedir.repositories.audit_repository import AuditRepository
from servicedir.repositories.service_repository import ServiceRepository
from servicedir.services.audit_service import AuditService
from servicedir.services.bulk_import import BulkImporter, parse_csv

from tests.factories import VOCABULARY

CSV = (
    "\ufeffLink,categorySlug\n"
    "https://immi.gov.au/student,visas-and-immigration\n"
    "\n"
    "not-a-link,visas-and-immigration\n"
    "https://ato.gov.au/fail,money-and-taxes\n"
    "https://ato.gov.au/tfn,\n"
)


def test_parse_csv_normalizes_headers_and_skips_blank_rows():
    rows = parse_csv(CSV)
    assert [r.line for r in rows] == [2, 4, 5, 6]
    assert rows[0].status == "pending"
    assert rows[0].data == {"link": "https://immi.gov.au/student", "category_slug": "visas-and-immigration"}


def test_parse_csv_flags_invalid_rows():
    rows = parse_csv(CSV)
    assert [r.status for r in rows] == ["pending", "error", "pending", "error"]
    assert rows[1].error.startswith("link")
    assert rows[3].error.startswith("category_slug")


def test_parse_csv_accepts_url_alias():
    rows = parse_csv("url,category\nhttps://example.gov/a,communications\n")
    assert rows[0].data == {"link": "https://example.gov/a", "category_slug": "communications"}
    assert rows[0].status == "pending"


def test_parse_csv_empty_upload():
    assert parse_csv("") == []
    assert parse_csv("link,category_slug\n") == []


@pytest.fixture
def importer(db, generator):
    return BulkImporter(
        ServiceRepository(db[mongo.SERVICES]),
        generator,
        VOCABULARY,
        AuditService(AuditRepository(db[mongo.AUDIT_LOGS])),
        concurrency=2,
    )


async def test_run_imports_good_rows_and_reports_failures(importer, db):
    report = await importer.run(CSV, "AU", "NSW", {"role": "admin", "id": "a1"})

    assert report.imported == 1
    assert report.failed == 3
    by_line = {r.line: r for r in report.rows}
    assert by_line[2].status == "success"
    assert by_line[2].service_id
    assert by_line[5].status == "error"
    assert by_line[5].error == "AI summarization failed."

    stored = await db[mongo.SERVICES].find_one({"link": "https://immi.gov.au/student"})
    assert stored["country"] == "AU"
    assert stored["state"] == "NSW"
    assert stored["status"] == "published"
    assert stored["verified"] is True
    assert stored["service_type"] == "guide"
    # only vocabulary tags survive
    assert stored["tags"] == ["Student visas"]

    logs = [d async for d in db[mongo.AUDIT_LOGS].find({"type": "service.import"})]
    assert len(logs) == 1
    assert logs[0]["meta"]["service_ids"] == [by_line[2].service_id]


async def test_run_without_successes_writes_nothing(importer, db):
    report = await importer.run("link,category_slug\nbad,x\n", "AU", None, {"role": "admin", "id": "a1"})
    assert report.imported == 0
    assert await db[mongo.SERVICES].count_documents({}) == 0
    assert await db[mongo.AUDIT_LOGS].count_documents({}) == 0


async def test_run_rejects_unknown_location(importer, generator):
    with pytest.raises(ValidationFailure) as exc_info:
        await importer.run(CSV, "AU", "BAGMATI", {"role": "admin", "id": "a1"})
    assert exc_info.value.violations[0][0] == "state"
    assert generator.calls == []


async def test_run_generates_icons_when_enabled(db, generator):
    importer = BulkImporter(
        ServiceRepository(db[mongo.SERVICES]),
        generator,
        VOCABULARY,
        AuditService(AuditRepository(db[mongo.AUDIT_LOGS])),
        with_icons=True,
    )
    await importer.run("link,category_slug\nhttps://example.gov/x,communications\n", "NP", None, {"id": "a1"})
    stored = await db[mongo.SERVICES].find_one({"link": "https://example.gov/x"})
    assert stored["icon_data_uri"] == "data:image/png;base64,AAAA"
    assert stored["tags"] == []


async def test_create_many_rolls_back_a_failed_batch(db):
    repo = ServiceRepository(db[mongo.SERVICES])
    existing = await repo.create({"title": "x"})

    with pytest.raises(UpstreamFailure):
        await repo.create_many([{"title": "first"}, {"_id": existing["_id"], "title": "dup"}, {"title": "third"}])

    titles = [d["title"] async for d in db[mongo.SERVICES].find({})]
    assert titles == ["x"]


async def test_run_saves_nothing_when_the_batch_fails(importer, db):
    await db[mongo.SERVICES].create_index("link", unique=True)
    await db[mongo.SERVICES].insert_one({"title": "Taken", "link": "https://ato.gov.au/tfn", "deleted": False})
    text = "link,category_slug\nhttps://immi.gov.au/student,visas-and-immigration\nhttps://ato.gov.au/tfn,money-and-taxes\n"

    with pytest.raises(UpstreamFailure):
        await importer.run(text, "AU", None, {"role": "admin", "id": "a1"})

    assert await db[mongo.SERVICES].count_documents({}) == 1
    assert await db[mongo.AUDIT_LOGS].count_documents({}) == 0
