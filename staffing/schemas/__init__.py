from .common import IdParam
from .candidate import BulkStatusUpdate, CandidateCreate, CandidateSearch, CandidateUpdate, SkillSearch
from .client import ClientCreate, ClientUpdate
from .job_order import JobOrderCreate, JobOrderFilter, JobOrderUpdate
from .assignment import AssignmentCreate, AssignmentFilter, AssignmentStatusUpdate

__all__ = [
    "IdParam",
    "CandidateCreate",
    "CandidateUpdate",
    "CandidateSearch",
    "SkillSearch",
    "BulkStatusUpdate",
    "ClientCreate",
    "ClientUpdate",
    "JobOrderCreate",
    "JobOrderUpdate",
    "JobOrderFilter",
    "AssignmentCreate",
    "AssignmentStatusUpdate",
    "AssignmentFilter",
]
