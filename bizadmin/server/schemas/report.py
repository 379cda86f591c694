from typing import List

from pydantic import Field

from bizadmin.server.schemas.common import WireModel


class ReportIn(WireModel):
    """
    A saved report configuration from the report builder.

    Example:
      {"name": "Q1", "dataSource": "Quotations", "reportType": "Bar Chart",
       "fields": ["clientName"], "filters": ""}
    """
    name: str = Field(..., min_length=1)
    data_source: str = Field(..., min_length=1)
    report_type: str = Field(..., min_length=1)
    fields: List[str] = []
    filters: str = ""


class Report(ReportIn):
    id: str
    # set once at creation, never refreshed
    last_generated: str
