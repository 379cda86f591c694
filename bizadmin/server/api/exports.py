from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from bizadmin.core.csv_export import export_filename, records_to_csv
from bizadmin.server.db.session import get_store
from bizadmin.server.db.store import COLLECTIONS, JsonStore
from bizadmin.server.schemas.common import Message
from bizadmin.services.collection_service import list_records

router = APIRouter(prefix="/api", tags=["exports"])


@router.get(
    "/{collection}/export.csv",
    summary="Download a collection as CSV",
    responses={404: {"model": Message}},
)
def export_collection_csv(collection: str, store: JsonStore = Depends(get_store)):
    if collection not in COLLECTIONS:
        raise HTTPException(status_code=404, detail=f"Unknown collection: {collection}")

    csv_text = records_to_csv(list_records(store, collection))
    return Response(
        content=csv_text,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename(collection)}"'
        },
    )
