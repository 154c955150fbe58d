from typing import List, Literal, Optional

from pydantic import Field

from .common import (
    Email,
    Experience,
    Id,
    Name,
    OptionalLongText,
    OptionalPhone,
    OptionalUrl,
    PartialUpdateSchema,
    RequestSchema,
)

CandidateStatus = Literal["active", "inactive", "placed"]


class CandidateCreate(RequestSchema):
    first_name: Name
    last_name: Name
    email: Email
    phone: OptionalPhone = None
    skills: OptionalLongText = None
    experience_years: Optional[Experience] = None
    resume_url: OptionalUrl = None
    status: CandidateStatus = "active"


class CandidateUpdate(PartialUpdateSchema):
    first_name: Name = None
    last_name: Name = None
    email: Email = None
    phone: OptionalPhone = None
    skills: OptionalLongText = None
    experience_years: Optional[Experience] = None
    resume_url: OptionalUrl = None
    status: CandidateStatus = None


class CandidateSearch(RequestSchema):
    skills: Optional[str] = Field(default=None, min_length=1, max_length=255)
    status: Optional[CandidateStatus] = None
    experience_min: Optional[float] = Field(default=None, ge=0, le=50)
    experience_max: Optional[float] = Field(default=None, ge=0, le=50)
    search: Optional[str] = Field(default=None, max_length=255)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class SkillSearch(RequestSchema):
    skills: Optional[str] = Field(default=None, max_length=255)
    min_experience: float = Field(default=0, ge=0, le=50)
    max_experience: float = Field(default=50, ge=0, le=50)


class BulkStatusUpdate(RequestSchema):
    candidate_ids: List[Id] = Field(min_length=1)
    status: CandidateStatus
