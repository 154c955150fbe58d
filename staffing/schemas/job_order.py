from typing import Annotated, Literal, Optional

from pydantic import BeforeValidator, StringConstraints

from .common import Experience, Id, OptionalLongText, RequestSchema, blank_to_none

JobOrderStatus = Literal["open", "closed", "filled"]
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)]
SalaryRange = Annotated[Optional[Annotated[str, StringConstraints(max_length=100)]], BeforeValidator(blank_to_none)]
Location = Annotated[Optional[Annotated[str, StringConstraints(max_length=255)]], BeforeValidator(blank_to_none)]


class JobOrderCreate(RequestSchema):
    title: Title
    description: OptionalLongText = None
    required_skills: OptionalLongText = None
    experience_required: Optional[Experience] = None
    client_id: Id
    salary_range: SalaryRange = None
    location: Location = None
    status: JobOrderStatus = "open"


class JobOrderUpdate(RequestSchema):
    """Full replacement: every mutable field must be sent, nullable ones may be null."""

    title: Title
    description: OptionalLongText
    required_skills: OptionalLongText
    experience_required: Optional[Experience]
    status: JobOrderStatus
    salary_range: SalaryRange
    location: Location


class JobOrderFilter(RequestSchema):
    status: Optional[JobOrderStatus] = None
    client_id: Optional[Id] = None
