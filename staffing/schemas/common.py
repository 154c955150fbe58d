"""Shared field types and base classes for request schemas."""
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    TypeAdapter,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

PHONE_PATTERN = r"^[+]?[0-9\s\-()]+$"


def blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _strip(v):
    return v.strip() if isinstance(v, str) else v


def _one_decimal(v):
    return round(v, 1)


_ANY_URL = TypeAdapter(AnyUrl)


def _url_shape(v):
    # checked only, the caller's string is kept as sent
    try:
        _ANY_URL.validate_python(v)
    except PydanticValidationError:
        raise PydanticCustomError("url_parsing", "Input should be a valid URL") from None
    return v


Id = Annotated[int, Field(ge=1)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
Email = Annotated[EmailStr, BeforeValidator(_strip)]
Phone = Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=20, pattern=PHONE_PATTERN)]
Text = Annotated[str, StringConstraints(max_length=1000)]
LongText = Annotated[str, StringConstraints(max_length=2000)]
Url = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500), AfterValidator(_url_shape)]
Experience = Annotated[float, Field(ge=0, le=50), AfterValidator(_one_decimal)]

# "" and null are both accepted for optional text and stored as NULL
OptionalName = Annotated[Optional[Name], BeforeValidator(blank_to_none)]
OptionalEmail = Annotated[Optional[Email], BeforeValidator(blank_to_none)]
OptionalPhone = Annotated[Optional[Phone], BeforeValidator(blank_to_none)]
OptionalText = Annotated[Optional[Text], BeforeValidator(blank_to_none)]
OptionalLongText = Annotated[Optional[LongText], BeforeValidator(blank_to_none)]
OptionalUrl = Annotated[Optional[Url], BeforeValidator(blank_to_none)]


class RequestSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class PartialUpdateSchema(RequestSchema):
    """Update payload where every field is optional but at least one is required."""

    @model_validator(mode="after")
    def _require_one_field(self):
        if not self.model_fields_set:
            raise PydanticCustomError("object_min", "Value must have at least 1 key")
        return self

    def to_patch(self):
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class IdParam(RequestSchema):
    id: Id
