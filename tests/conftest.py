# tests/conftest.py
import json
import os, sys
# put the project root (the directory holding "bizadmin") first on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest
from fastapi.testclient import TestClient

from bizadmin.server.db.session import get_store
from bizadmin.server.db.store import JsonStore
from bizadmin.server.main import app


SAMPLE_DB = {
    "quotations": [
        {
            "id": "Q-001",
            "version": 1,
            "status": "Approved",
            "clientName": "Acme Corporation",
            "dateCreated": "2024-01-10",
            "totalValue": 1500,
            "currency": "USD",
            "items": [{"description": "Website redesign", "quantity": 1, "price": 1500}],
        },
    ],
    "clients": [
        {"id": 1, "name": "Acme Corporation", "contactPerson": "Jane Roe",
         "email": "jane@acme.example", "phone": "555-0100", "status": "Active"},
        {"id": 2, "name": "Globex Ltd", "contactPerson": "Hank Scorpio",
         "email": "hank@globex.example", "phone": "555-0142", "status": "Inactive"},
    ],
    "invoices": [
        {"id": "INV-001", "clientName": "Acme Corporation", "amount": 1500, "currency": "USD",
         "issueDate": "2024-01-15", "dueDate": "2024-02-14", "status": "Paid"},
    ],
    "reports": [],
}


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps(SAMPLE_DB, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def store(db_path):
    return JsonStore(db_path)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
