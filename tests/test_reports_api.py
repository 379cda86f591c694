import re
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from bizadmin.server.db.store import JsonStore
from bizadmin.server.db.session import get_store
from bizadmin.server.main import app


Q1_REPORT = {
    "name": "Q1",
    "dataSource": "Quotations",
    "reportType": "Bar Chart",
    "fields": ["clientName"],
    "filters": "",
}


def test_save_list_delete_roundtrip(client):
    r = client.post("/api/reports", json=Q1_REPORT)
    assert r.status_code == 201
    report = r.json()
    assert re.fullmatch(r"REP-\d+", report["id"])
    assert report["lastGenerated"] == datetime.now(timezone.utc).date().isoformat()
    assert report["fields"] == ["clientName"]

    listed = client.get("/api/reports").json()
    assert [x["id"] for x in listed] == [report["id"]]

    assert client.delete(f"/api/reports/{report['id']}").status_code == 204
    assert client.get("/api/reports").json() == []


def test_missing_fields_rejected(client, db_path):
    before = db_path.read_bytes()
    for missing in ("name", "dataSource", "reportType"):
        payload = {k: v for k, v in Q1_REPORT.items() if k != missing}
        r = client.post("/api/reports", json=payload)
        assert r.status_code == 400
        assert r.json()["message"] == "Missing required report configuration fields"
    assert db_path.read_bytes() == before


def test_fields_and_filters_default(client):
    body = client.post(
        "/api/reports",
        json={"name": "Overdue", "dataSource": "Invoices", "reportType": "Table"},
    ).json()
    assert body["fields"] == []
    assert body["filters"] == ""


def test_delete_unknown_is_404_and_file_unchanged(client, db_path):
    before = db_path.read_bytes()
    r = client.delete("/api/reports/REP-0")
    assert r.status_code == 404
    assert r.json() == {"message": "Report not found"}
    assert db_path.read_bytes() == before


class _BrokenStore(JsonStore):
    def write(self, document):
        raise OSError("disk full")


def test_store_failure_on_save_is_500(tmp_path):
    app.dependency_overrides[get_store] = lambda: _BrokenStore(tmp_path / "db.json")
    try:
        r = TestClient(app).post("/api/reports", json=Q1_REPORT)
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error while saving the report."}


def test_store_failure_on_delete_is_500(tmp_path):
    path = tmp_path / "db.json"
    path.write_text('{"reports": [{"id": "REP-1"}]}', encoding="utf-8")
    app.dependency_overrides[get_store] = lambda: _BrokenStore(path)
    try:
        r = TestClient(app).delete("/api/reports/REP-1")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error while deleting the report."}
