# file: bizadmin/services/collection_service.py

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Optional

from bizadmin.server.db.store import JsonStore, RecordNotFound

RE_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def list_records(store: JsonStore, collection: str) -> List[Dict[str, Any]]:
    """The stored collection as-is: no filtering, no paging, no re-validation."""
    return store.collection(collection)


def delete_where(
    store: JsonStore,
    collection: str,
    matches: Callable[[Dict[str, Any]], bool],
    record_id: Any,
) -> None:
    """
    Remove every record for which matches(record) is true.

    Raises RecordNotFound when the collection length is unchanged; the file
    is then not rewritten at all.
    """
    with store.mutate() as db:
        before = db[collection]
        kept = [r for r in before if not (isinstance(r, dict) and matches(r))]
        if len(kept) == len(before):
            raise RecordNotFound(collection, record_id)
        db[collection] = kept


def delete_by_id(store: JsonStore, collection: str, record_id: str) -> None:
    """String-identity delete, used for quotations, invoices and reports."""
    delete_where(store, collection, lambda r: r.get("id") == record_id, record_id)


def parse_int_id(raw: str) -> Optional[int]:
    """
    Parse an id from the URL the way browsers' parseInt does:
      "12"    -> 12
      " 7abc" -> 7
      "abc"   -> None (matches nothing)
    """
    m = RE_LEADING_INT.match(raw or "")
    if not m:
        return None
    return int(m.group(1))


def delete_client(store: JsonStore, raw_id: str) -> None:
    client_id = parse_int_id(raw_id)

    def _matches(record: Dict[str, Any]) -> bool:
        value = record.get("id")
        # bool is an int subclass; True must not match client 1
        return client_id is not None and type(value) is int and value == client_id

    delete_where(store, "clients", _matches, raw_id)


def delete_invoice(store: JsonStore, invoice_id: str) -> None:
    delete_by_id(store, "invoices", invoice_id)
