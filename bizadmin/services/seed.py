from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Type

import yaml
from pydantic import BaseModel

from bizadmin.server.db.store import COLLECTIONS, JsonStore
from bizadmin.server.schemas.client import Client
from bizadmin.server.schemas.invoice import Invoice
from bizadmin.server.schemas.quotation import Quotation
from bizadmin.server.schemas.report import Report

logger = logging.getLogger(__name__)

SCHEMAS: Dict[str, Type[BaseModel]] = {
    "quotations": Quotation,
    "clients": Client,
    "invoices": Invoice,
    "reports": Report,
}


def load_seed_file(path: Path) -> Dict[str, List[Dict[str, Any]]]:
    """
    Read a seed file (.yaml/.yml or .json).

    Expected structure, any subset of the four collections:

      clients:
        - {id: 1, name: "Acme Corp", contactPerson: "Jane Roe", status: Active}
      invoices:
        - {id: "INV-001", clientName: "Acme Corp", amount: 1200, status: Paid}
    """
    with path.open("r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path}: top level must be a mapping of collections")

    unknown = sorted(set(data) - set(COLLECTIONS))
    if unknown:
        raise ValueError(f"Seed file {path}: unknown collections {', '.join(unknown)}")

    out: Dict[str, List[Dict[str, Any]]] = {}
    for name, records in data.items():
        if records is None:
            continue
        if not isinstance(records, list):
            raise ValueError(f"Seed file {path}: '{name}' must be a list")
        schema = SCHEMAS[name]
        # validates each record; raises pydantic.ValidationError on bad data
        out[name] = [schema.model_validate(r).model_dump(by_alias=True) for r in records]
    return out


def seed_store(
    store: JsonStore,
    seed: Dict[str, List[Dict[str, Any]]],
    replace: bool = False,
) -> Dict[str, int]:
    """
    Put seed records into the store. Appends by default; replace=True
    overwrites each collection named in the seed. Returns records added per
    collection.
    """
    counts: Dict[str, int] = {}
    with store.mutate() as db:
        for name, records in seed.items():
            if replace:
                db[name] = list(records)
            else:
                db[name].extend(records)
            counts[name] = len(records)

    for name, n in counts.items():
        logger.info("Seeded %d record(s) into %s", n, name)
    return counts
