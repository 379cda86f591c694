from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from bizadmin.server.db.store import JsonStore
from bizadmin.server.schemas.report import Report, ReportIn
from bizadmin.services.collection_service import delete_by_id

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def report_id_for(moment: datetime) -> str:
    """REP-<milliseconds since the epoch>, e.g. REP-1700000000000."""
    return f"REP-{int(moment.timestamp() * 1000)}"


def create_report(
    payload: ReportIn,
    store: JsonStore,
    now: Optional[Callable[[], datetime]] = None,
) -> Dict[str, Any]:
    """
    Save a report configuration.

    id comes from the wall clock, so two saves within the same millisecond
    get the same id. lastGenerated is today's UTC date and is never updated.
    """
    moment = (now or _utcnow)()
    record = payload.to_record()
    record.update(
        id=report_id_for(moment),
        lastGenerated=moment.date().isoformat(),
    )
    stored = Report.model_validate(record).to_record()

    with store.mutate() as db:
        db["reports"].append(stored)

    logger.info("Saved report %s (%s)", stored["id"], stored["name"])
    return stored


def delete_report(store: JsonStore, report_id: str) -> None:
    delete_by_id(store, "reports", report_id)
    logger.info("Deleted report %s", report_id)
