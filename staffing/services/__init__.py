"""Service factories wired to the request-scoped SQLAlchemy session."""
from staffing.extensions import db
from staffing.repositories import (
    AssignmentRepository,
    CandidateRepository,
    ClientRepository,
    JobOrderRepository,
)

from .assignment_service import AssignmentService
from .candidate_service import CandidateService
from .client_service import ClientService
from .dashboard_service import DashboardService
from .job_order_service import JobOrderService


def candidate_service(session=None):
    session = session if session is not None else db.session
    return CandidateService(CandidateRepository(session), AssignmentRepository(session))


def client_service(session=None):
    session = session if session is not None else db.session
    return ClientService(ClientRepository(session), JobOrderRepository(session))


def job_order_service(session=None):
    session = session if session is not None else db.session
    return JobOrderService(JobOrderRepository(session), ClientRepository(session), AssignmentRepository(session))


def assignment_service(session=None):
    session = session if session is not None else db.session
    return AssignmentService(AssignmentRepository(session), CandidateRepository(session), JobOrderRepository(session))


def dashboard_service(session=None):
    session = session if session is not None else db.session
    return DashboardService(
        CandidateRepository(session),
        ClientRepository(session),
        JobOrderRepository(session),
        AssignmentRepository(session),
    )
