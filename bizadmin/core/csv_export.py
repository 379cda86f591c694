"""
CSV export of a stored collection.

Same output as the front end's table exporter: header row first, every
cell wrapped in double quotes, embedded quotes doubled.
"""
from typing import Any, Dict, Iterable, List
import csv
import io
import json


def collect_columns(records: Iterable[Dict[str, Any]]) -> List[str]:
    """Union of record keys, in the order they are first seen."""
    columns: List[str] = []
    seen = set()
    for r in records:
        for key in r:
            if key not in seen:
                seen.add(key)
                columns.append(key)
    return columns


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def records_to_csv(records: List[Any]) -> str:
    rows = [r for r in records if isinstance(r, dict)]
    columns = collect_columns(rows)

    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    if columns:
        writer.writerow(columns)
    for r in rows:
        writer.writerow([_cell(r.get(c)) for c in columns])
    return buf.getvalue()


def export_filename(collection: str) -> str:
    return f"{collection}-export.csv"
