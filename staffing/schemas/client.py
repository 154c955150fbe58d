from typing import Annotated, Literal, Optional

from pydantic import StringConstraints

from .common import (
    OptionalEmail,
    OptionalLongText,
    OptionalName,
    OptionalPhone,
    PartialUpdateSchema,
    RequestSchema,
)

ClientStatus = Literal["active", "inactive"]
CompanyName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)]


class ClientCreate(RequestSchema):
    company_name: CompanyName
    contact_person: OptionalName = None
    email: OptionalEmail = None
    phone: OptionalPhone = None
    address: OptionalLongText = None
    status: ClientStatus = "active"


class ClientUpdate(PartialUpdateSchema):
    company_name: CompanyName = None
    contact_person: OptionalName = None
    email: OptionalEmail = None
    phone: OptionalPhone = None
    address: OptionalLongText = None
    status: ClientStatus = None
