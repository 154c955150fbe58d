from .base import Repository, unit_of_work
from .candidate_repository import CandidateRepository
from .client_repository import ClientRepository
from .job_order_repository import JobOrderRepository
from .assignment_repository import AssignmentRepository

__all__ = [
    "Repository",
    "unit_of_work",
    "CandidateRepository",
    "ClientRepository",
    "JobOrderRepository",
    "AssignmentRepository",
]
