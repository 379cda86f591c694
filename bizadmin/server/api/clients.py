from fastapi import APIRouter, Depends, HTTPException, Response, status

from bizadmin.server.db.session import get_store
from bizadmin.server.db.store import JsonStore, RecordNotFound
from bizadmin.server.schemas.common import Message
from bizadmin.services.collection_service import delete_client, list_records

# read/delete only: clients are seeded, see `python -m bizadmin.cli seed`
router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("", summary="List all clients")
def list_clients(store: JsonStore = Depends(get_store)):
    return list_records(store, "clients")


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": Message}},
)
def delete_client_endpoint(client_id: str, store: JsonStore = Depends(get_store)):
    try:
        delete_client(store, client_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Client not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
