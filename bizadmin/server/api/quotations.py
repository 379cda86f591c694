from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import HTMLResponse

from bizadmin.server.db.session import get_store
from bizadmin.server.db.store import JsonStore, RecordNotFound
from bizadmin.server.schemas.common import Message, ValidationMessage
from bizadmin.server.schemas.quotation import Quotation, QuotationIn
from bizadmin.server.settings.config import settings
from bizadmin.services.quotation_document import (
    build_context_from_quotation,
    render_quotation_html,
)
from bizadmin.services.quotation_service import (
    create_quotation,
    delete_quotation,
    find_quotation,
)
from bizadmin.services.collection_service import list_records

router = APIRouter(prefix="/api/quotations", tags=["quotations"])


# ==============================
# LIST
# ==============================

@router.get("", summary="List all quotations")
def list_quotations(store: JsonStore = Depends(get_store)):
    return list_records(store, "quotations")


# ==============================
# CREATE
# ==============================

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a quotation",
    responses={201: {"model": Quotation}, 400: {"model": ValidationMessage}},
)
def create_quotation_endpoint(payload: QuotationIn, store: JsonStore = Depends(get_store)):
    return create_quotation(
        payload=payload,
        store=store,
        id_strategy=settings.quotation_id_strategy,
    )


# ==============================
# DELETE
# ==============================

@router.delete(
    "/{quotation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": Message}},
)
def delete_quotation_endpoint(quotation_id: str, store: JsonStore = Depends(get_store)):
    try:
        delete_quotation(store, quotation_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Quotation not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==============================
# DOCUMENT (HTML, printable)
# ==============================

@router.get(
    "/{quotation_id}/document",
    response_class=HTMLResponse,
    summary="Render a quotation as a printable HTML document",
    responses={404: {"model": Message}},
)
def get_quotation_document(quotation_id: str, store: JsonStore = Depends(get_store)):
    q = find_quotation(store, quotation_id)
    if not q:
        raise HTTPException(status_code=404, detail="Quotation not found")

    ctx = build_context_from_quotation(q, settings.company())
    return HTMLResponse(content=render_quotation_html(ctx))
