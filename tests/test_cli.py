import json

import pytest
from pydantic import ValidationError

from bizadmin.cli.__main__ import main
from bizadmin.server.db.store import JsonStore
from bizadmin.services.seed import load_seed_file

SEED_YAML = """
clients:
  - {id: 10, name: "Umbrella", contactPerson: "Alice", status: Active}
invoices:
  - {id: "INV-010", clientName: "Umbrella", amount: 99.5, status: Overdue}
"""


def test_seed_appends(tmp_path, db_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text(SEED_YAML, encoding="utf-8")

    assert main(["--db", str(db_path), "seed", str(seed)]) == 0

    db = JsonStore(db_path).read()
    assert [c["id"] for c in db["clients"]] == [1, 2, 10]
    assert db["clients"][-1]["contactPerson"] == "Alice"
    assert db["invoices"][-1]["status"] == "Overdue"


def test_seed_replace(tmp_path, db_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text(SEED_YAML, encoding="utf-8")

    assert main(["--db", str(db_path), "seed", str(seed), "--replace"]) == 0

    db = JsonStore(db_path).read()
    assert [c["id"] for c in db["clients"]] == [10]
    # collections not in the seed file are untouched
    assert [q["id"] for q in db["quotations"]] == ["Q-001"]


def test_seed_rejects_bad_status(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"clients": [{"id": 1, "name": "X", "status": "Gone"}]}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_seed_file(seed)


def test_seed_rejects_unknown_collection(tmp_path, db_path, capsys):
    seed = tmp_path / "seed.yaml"
    seed.write_text("orders: []\n", encoding="utf-8")
    assert main(["--db", str(db_path), "seed", str(seed)]) == 2
    assert "unknown collections orders" in capsys.readouterr().err


def test_export_to_stdout(db_path, capsys):
    assert main(["--db", str(db_path), "export", "clients"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == '"id","name","contactPerson","email","phone","status"'
    assert '"Globex Ltd"' in out


def test_export_to_file(tmp_path, db_path):
    target = tmp_path / "q.csv"
    assert main(["--db", str(db_path), "export", "quotations", "--out", str(target)]) == 0
    assert '"Q-001"' in target.read_text(encoding="utf-8")
