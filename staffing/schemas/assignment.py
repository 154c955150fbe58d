from datetime import datetime, timezone
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, field_validator, model_validator
from pydantic_core import PydanticCustomError

from .common import Id, OptionalText, RequestSchema

AssignmentStatus = Literal["applied", "interviewing", "offered", "placed", "rejected"]


def as_naive_utc(v):
    """Stored datetimes are naive UTC, like the server-side timestamps."""
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


UtcDateTime = Annotated[Optional[datetime], AfterValidator(as_naive_utc)]


class AssignmentCreate(RequestSchema):
    candidate_id: Id
    job_order_id: Id
    status: AssignmentStatus = "applied"
    notes: OptionalText = None
    assigned_date: UtcDateTime = None

    @field_validator("assigned_date")
    @classmethod
    def _not_in_future(cls, v):
        if v is not None and v > datetime.utcnow():
            raise PydanticCustomError("date_max", "Date must be less than or equal to now")
        return v


class AssignmentStatusUpdate(RequestSchema):
    status: AssignmentStatus
    notes: OptionalText = None
    start_date: UtcDateTime = None
    end_date: UtcDateTime = None

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise PydanticCustomError("date_min", "end_date must be greater than or equal to start_date")
        return self


class AssignmentFilter(RequestSchema):
    status: Optional[AssignmentStatus] = None
