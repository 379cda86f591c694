from fastapi import APIRouter, Depends, HTTPException, Response, status

from bizadmin.server.db.session import get_store
from bizadmin.server.db.store import JsonStore, RecordNotFound
from bizadmin.server.schemas.common import Message
from bizadmin.services.collection_service import delete_invoice, list_records

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.get("", summary="List all invoices")
def list_invoices(store: JsonStore = Depends(get_store)):
    return list_records(store, "invoices")


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": Message}},
)
def delete_invoice_endpoint(invoice_id: str, store: JsonStore = Depends(get_store)):
    try:
        delete_invoice(store, invoice_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
