from typing import Literal, Optional

from bizadmin.server.schemas.common import WireModel

ClientStatus = Literal["Active", "Inactive"]


class Client(WireModel):
    """Collection: clients. Seeded externally, there is no create endpoint."""
    id: int
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: ClientStatus = "Active"
