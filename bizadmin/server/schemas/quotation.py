from typing import List, Literal, Optional

from pydantic import Field

from bizadmin.server.schemas.common import Number, WireModel

QuotationStatus = Literal["Pending", "Approved", "Rejected"]


class QuotationItem(WireModel):
    """One line of a quotation, e.g. "Consulting hours" x 10 at 120."""
    description: Optional[str] = ""
    quantity: Number = 0
    price: Number = 0


class QuotationIn(WireModel):
    """
    Payload for POST /api/quotations.

    Only client_name and total_value are required. id, version and status
    are always assigned by the server, whatever the client sends.
    """
    client_name: str = Field(..., min_length=1)
    total_value: Number
    date_created: Optional[str] = None
    currency: Optional[str] = None
    items: List[QuotationItem] = []


class Quotation(QuotationIn):
    id: str
    version: int = 1
    status: QuotationStatus = "Pending"
