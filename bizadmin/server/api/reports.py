import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from bizadmin.server.db.session import get_store
from bizadmin.server.db.store import JsonStore, RecordNotFound
from bizadmin.server.schemas.common import Message, ValidationMessage
from bizadmin.server.schemas.report import Report, ReportIn
from bizadmin.services.collection_service import list_records
from bizadmin.services.report_service import create_report, delete_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("", summary="List saved report configurations")
def list_reports(store: JsonStore = Depends(get_store)):
    return list_records(store, "reports")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Save a report configuration",
    responses={
        201: {"model": Report},
        400: {"model": ValidationMessage},
        500: {"model": Message},
    },
)
def create_report_endpoint(payload: ReportIn, store: JsonStore = Depends(get_store)):
    try:
        return create_report(payload=payload, store=store)
    except Exception as e:
        logger.exception("Error in POST /api/reports")
        raise HTTPException(
            status_code=500,
            detail="Internal Server Error while saving the report.",
        ) from e


@router.delete(
    "/{report_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": Message}, 500: {"model": Message}},
)
def delete_report_endpoint(report_id: str, store: JsonStore = Depends(get_store)):
    try:
        delete_report(store, report_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Report not found")
    except Exception as e:
        logger.exception("Error in DELETE /api/reports/%s", report_id)
        raise HTTPException(
            status_code=500,
            detail="Internal Server Error while deleting the report.",
        ) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
