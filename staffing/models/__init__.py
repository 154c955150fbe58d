from .candidate import Candidate, CANDIDATE_STATUSES
from .client import Client, CLIENT_STATUSES
from .job_order import JobOrder, JOB_ORDER_STATUSES
from .assignment import Assignment, ASSIGNMENT_STATUSES

__all__ = [
    "Candidate",
    "Client",
    "JobOrder",
    "Assignment",
    "CANDIDATE_STATUSES",
    "CLIENT_STATUSES",
    "JOB_ORDER_STATUSES",
    "ASSIGNMENT_STATUSES",
]
