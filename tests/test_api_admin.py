import pytest

from servicedir.db import mongo
from servicedir.jobs.seed_directory import seed_directory
from servicedir.models.category import CategoryDB
from servicedir.repositories.category_repository import CategoryRepository
from servicedir.repositories.service_repository import ServiceRepository

from tests.factories import ADMIN, VISITOR

SERVICE = {
    "title": "Apply for a Tax File Number",
    "link": "https://www.ato.gov.au/tfn",
    "category_slug": "money-and-taxes",
    "description": "Your TFN is your personal reference number in the tax system.",
    "steps": "Check eligibility\nApply online",
    "country": "AU",
    "tags": ["Personal taxation"],
}


@pytest.fixture
async def category(client):
    r = await client.post(
        "/admin/categories",
        json={"name": "Money & Taxes", "slug": "money-and-taxes", "icon_name": "Banknote"},
        headers=ADMIN,
    )
    return r.json()


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/admin/dashboard"),
        ("get", "/admin/services"),
        ("post", "/admin/categories"),
        ("get", "/admin/submissions"),
        ("get", "/admin/reports"),
        ("get", "/admin/audit"),
        ("post", "/admin/bulk-import/preview"),
    ],
)
async def test_admin_routes_require_admin_role(client, method, path):
    r = await getattr(client, method)(path, headers=VISITOR)
    assert r.status_code == 403
    r = await getattr(client, method)(path)
    assert r.status_code == 403


# -------------------------
# Categories
# -------------------------
async def test_duplicate_category_slug_is_conflict(client, category):
    r = await client.post(
        "/admin/categories",
        json={"name": "Money again", "slug": "money-and-taxes", "icon_name": "Banknote"},
        headers=ADMIN,
    )
    assert r.status_code == 409


async def test_category_icon_must_be_known(client):
    r = await client.post(
        "/admin/categories",
        json={"name": "Pets", "slug": "pets", "icon_name": "Dog"},
        headers=ADMIN,
    )
    assert r.status_code == 422


async def test_delete_category_leaves_services(client, category):
    svc = (await client.post("/admin/services", json=SERVICE, headers=ADMIN)).json()

    r = await client.delete(f"/admin/categories/{category['id']}", headers=ADMIN)
    assert r.json() == {"success": True}
    assert (await client.get("/admin/categories", headers=ADMIN)).json() == []
    assert (await client.get(f"/categories/{SERVICE['category_slug']}")).status_code == 404
    assert (await client.get(f"/services/{svc['id']}")).status_code == 200

    r = await client.delete(f"/admin/categories/{category['id']}", headers=ADMIN)
    assert r.status_code == 404


# -------------------------
# Services
# -------------------------
async def test_create_rejects_unknown_category_and_location(client):
    r = await client.post(
        "/admin/services",
        json={**SERVICE, "category_slug": "nowhere", "country": "AU", "state": "BAGMATI"},
        headers=ADMIN,
    )
    assert r.status_code == 422
    fields = {v["field"] for v in r.json()["detail"]["violations"]}
    assert fields == {"state", "category_slug"}


async def test_create_update_and_list(client, category):
    created = (await client.post("/admin/services", json=SERVICE, headers=ADMIN)).json()
    assert created["status"] == "published"
    assert created["steps"] == ["Check eligibility", "Apply online"]

    r = await client.put(
        f"/admin/services/{created['id']}",
        json={**SERVICE, "title": "Get a Tax File Number", "tags": ["Superannuation"]},
        headers=ADMIN,
    )
    assert r.status_code == 200
    assert r.json()["title"] == "Get a Tax File Number"

    listing = (await client.get("/admin/services", headers=ADMIN)).json()
    assert listing["count"] == 1
    assert listing["category_counts"] == {"money-and-taxes": 1}

    logs = (await client.get("/admin/audit", headers=ADMIN)).json()
    update = next(log for log in logs if log["type"] == "service.update")
    assert "title" in update["meta"]["fields"]
    assert update["meta"]["tags"] == {"added": ["Superannuation"], "removed": ["Personal taxation"]}
    assert update["actor"] == {"role": "admin", "id": "admin-1"}

    history = (await client.get(
        "/admin/audit", params={"entity_type": "service", "entity_id": created["id"]}, headers=ADMIN,
    )).json()
    assert sorted(log["type"] for log in history) == ["service.create", "service.update"]


async def test_toggle_status_round_trip(client, category):
    sid = (await client.post("/admin/services", json=SERVICE, headers=ADMIN)).json()["id"]
    first = await client.post(f"/admin/services/{sid}/toggle-status", headers=ADMIN)
    second = await client.post(f"/admin/services/{sid}/toggle-status", headers=ADMIN)
    assert first.json()["status"] == "disabled"
    assert second.json()["status"] == "published"


async def test_admin_listing_includes_disabled(client, category):
    sid = (await client.post("/admin/services", json=SERVICE, headers=ADMIN)).json()["id"]
    await client.post(f"/admin/services/{sid}/toggle-status", headers=ADMIN)
    listing = (await client.get("/admin/services", headers=ADMIN)).json()
    assert [s["status"] for s in listing["items"]] == ["disabled"]


async def test_delete_service(client, category):
    sid = (await client.post("/admin/services", json=SERVICE, headers=ADMIN)).json()["id"]
    assert (await client.delete(f"/admin/services/{sid}", headers=ADMIN)).json() == {"success": True}
    assert (await client.get(f"/admin/services/{sid}", headers=ADMIN)).status_code == 404
    assert (await client.delete(f"/admin/services/{sid}", headers=ADMIN)).status_code == 404
    assert (await client.get("/search", params={"q": "tax"})).json()["count"] == 0


async def test_unknown_service_is_404(client):
    assert (await client.get("/admin/services/64b7c2c9f1c2a8b123456789", headers=ADMIN)).status_code == 404
    r = await client.post("/admin/services/64b7c2c9f1c2a8b123456789/toggle-status", headers=ADMIN)
    assert r.status_code == 404


# -------------------------
# Inquiries
# -------------------------
async def test_reports_grouped_and_resolved(client, category):
    sid = (await client.post("/admin/services", json=SERVICE, headers=ADMIN)).json()["id"]
    for reason in ("The link is broken now.", "Steps are out of date."):
        await client.post(f"/services/{sid}/reports", json={"reporter_email": "a@example.com", "reason": reason})

    groups = (await client.get("/admin/reports", headers=ADMIN)).json()
    assert len(groups) == 1
    assert groups[0]["service_id"] == sid
    assert len(groups[0]["reports"]) == 2

    rid = groups[0]["reports"][0]["id"]
    r = await client.post(f"/admin/reports/{rid}/resolve", headers=ADMIN)
    assert r.json()["status"] == "resolved"
    groups = (await client.get("/admin/reports", headers=ADMIN)).json()
    assert len(groups[0]["reports"]) == 1


async def test_submission_review(client, db):
    await seed_directory(db)
    r = await client.post("/submissions", json={
        "submission_type": "service",
        "name": "Ram",
        "email": "ram@example.com",
        "notes": "Useful for newly arrived students.",
        "title": "Student accommodation guide",
        "url": "https://www.studyaustralia.gov.au/",
        "category_slug": "education-and-training",
        "country": "AU",
    })
    sub_id = r.json()["id"]

    pending = (await client.get("/admin/submissions", headers=ADMIN)).json()
    assert [s["id"] for s in pending] == [sub_id]

    dash = (await client.get("/admin/dashboard", headers=ADMIN)).json()
    assert dash["pending_submissions"] == 1
    assert dash["categories"] == 16

    resolved = await client.post(f"/admin/submissions/{sub_id}/resolve", headers=ADMIN)
    assert resolved.json()["status"] == "resolved"
    assert (await client.get("/admin/submissions", headers=ADMIN)).json() == []
    done = (await client.get("/admin/submissions", params={"status": "resolved"}, headers=ADMIN)).json()
    assert [s["id"] for s in done] == [sub_id]

    assert (await client.delete(f"/admin/submissions/{sub_id}", headers=ADMIN)).json() == {"success": True}
    assert (await client.delete(f"/admin/submissions/{sub_id}", headers=ADMIN)).status_code == 404


# -------------------------
# Bulk import
# -------------------------
CSV = b"link,categorySlug\nhttps://www.ato.gov.au/tfn,money-and-taxes\nbroken,money-and-taxes\n"


async def test_bulk_import_preview(client):
    r = await client.post(
        "/admin/bulk-import/preview",
        files={"file": ("links.csv", CSV, "text/csv")},
        headers=ADMIN,
    )
    assert r.status_code == 200
    assert [row["status"] for row in r.json()] == ["pending", "error"]


async def test_bulk_import_rejects_non_csv(client):
    r = await client.post(
        "/admin/bulk-import/preview",
        files={"file": ("links.txt", b"hello", "text/plain")},
        headers=ADMIN,
    )
    assert r.status_code == 400


async def test_bulk_import_run(client, category):
    r = await client.post(
        "/admin/bulk-import",
        files={"file": ("links.csv", CSV, "text/csv")},
        data={"country": "AU", "state": "VIC"},
        headers=ADMIN,
    )
    assert r.status_code == 200, r.text
    report = r.json()
    assert report["imported"] == 1
    assert report["failed"] == 1

    page = (await client.get("/categories/money-and-taxes", params={"state": "VIC"})).json()
    assert page["count"] == 1
    assert page["services"][0]["title"] == "Summary of https://www.ato.gov.au/tfn"


async def test_bulk_import_bad_location_is_422(client):
    r = await client.post(
        "/admin/bulk-import",
        files={"file": ("links.csv", CSV, "text/csv")},
        data={"country": "XX"},
        headers=ADMIN,
    )
    assert r.status_code == 422


# -------------------------
# Store-level guarantees
# -------------------------
async def test_live_slug_is_unique_in_the_store(db):
    repo = CategoryRepository(db[mongo.CATEGORIES])
    await repo.create_indexes()
    first = await repo.create(CategoryDB(name="Pets", slug="pets", icon_name="Home"))

    with pytest.raises(ValueError):
        await repo.create(CategoryDB(name="Pets again", slug="pets", icon_name="Home"))

    assert await repo.delete(str(first["_id"]))
    again = await repo.create(CategoryDB(name="Pets", slug="pets", icon_name="Home"))
    assert again["_id"] != first["_id"]


async def test_service_ids_with_padding_resolve(db):
    repo = ServiceRepository(db[mongo.SERVICES])
    doc = await repo.create({"title": "Passports"})
    padded = f" {doc['_id']} "

    updated = await repo.update(padded, {"title": "Renew a passport"})
    assert updated["title"] == "Renew a passport"
    assert await repo.delete(padded)
    assert await repo.get(padded) is None


async def test_dashboard_counts(client, category):
    await client.post("/admin/services", json=SERVICE, headers=ADMIN)
    dash = (await client.get("/admin/dashboard", headers=ADMIN)).json()
    assert dash == {"services": 1, "categories": 1, "pending_submissions": 0, "pending_reports": 0}
