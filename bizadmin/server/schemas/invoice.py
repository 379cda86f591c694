from typing import Literal, Optional

from bizadmin.server.schemas.common import Number, WireModel

InvoiceStatus = Literal["Paid", "Pending", "Overdue"]


class Invoice(WireModel):
    """Collection: invoices. Seeded externally, there is no create endpoint."""
    id: str
    client_name: str
    amount: Number
    currency: Optional[str] = None
    issue_date: Optional[str] = None
    due_date: Optional[str] = None
    status: InvoiceStatus = "Pending"
