from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from bizadmin.server.db.store import JsonStore
from bizadmin.server.schemas.quotation import QuotationIn
from bizadmin.services.collection_service import delete_by_id

logger = logging.getLogger(__name__)

ID_PREFIX = "Q-"
ID_STRATEGIES = ("length", "monotonic")
RE_QUOTATION_ID = re.compile(r"^Q-(\d+)$")


def format_quotation_id(number: int) -> str:
    """7 -> "Q-007", 1234 -> "Q-1234" (padded to at least three digits)."""
    return f"{ID_PREFIX}{number:03d}"


def next_quotation_id(quotations: List[Dict[str, Any]], strategy: str = "length") -> str:
    """
    Pick the id for a new quotation.

    Strategies:
      - "length":    len(collection) + 1. After a delete this can hand out
                     an id that is still in use (Q-001, Q-002 -> delete Q-001
                     -> next is Q-002 again).
      - "monotonic": highest numeric Q-### suffix + 1, never reissues a live id.
    """
    if strategy == "length":
        return format_quotation_id(len(quotations) + 1)

    if strategy == "monotonic":
        highest = 0
        for q in quotations:
            if not isinstance(q, dict):
                continue
            m = RE_QUOTATION_ID.match(str(q.get("id") or ""))
            if m:
                highest = max(highest, int(m.group(1)))
        return format_quotation_id(highest + 1)

    raise ValueError(f"Unknown quotation id strategy: {strategy!r}")


def create_quotation(
    payload: QuotationIn,
    store: JsonStore,
    id_strategy: str = "length",
) -> Dict[str, Any]:
    """
    Append a quotation and return it as stored. The record keeps exactly the
    keys the client sent (optional fields left out stay out).

    The server always sets:
      - id      (see next_quotation_id)
      - version = 1
      - status  = "Pending"
    """
    with store.mutate() as db:
        record = payload.to_record(exclude_unset=True)
        record.update(
            id=next_quotation_id(db["quotations"], id_strategy),
            version=1,
            status="Pending",
        )
        db["quotations"].append(record)

    logger.info("Created quotation %s for %s", record["id"], record["clientName"])
    return record


def find_quotation(store: JsonStore, quotation_id: str) -> Optional[Dict[str, Any]]:
    for q in store.collection("quotations"):
        if isinstance(q, dict) and q.get("id") == quotation_id:
            return q
    return None


def delete_quotation(store: JsonStore, quotation_id: str) -> None:
    delete_by_id(store, "quotations", quotation_id)
    logger.info("Deleted quotation %s", quotation_id)
