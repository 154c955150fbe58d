from flask import Blueprint

from staffing.responses import success
from staffing.schemas import AssignmentCreate, AssignmentFilter, AssignmentStatusUpdate
from staffing.services import assignment_service
from staffing.validation import parse_id, validate

assignments_bp = Blueprint("assignments_api", __name__, url_prefix="/api/assignments")


@assignments_bp.route("", methods=["GET"])
@validate(AssignmentFilter, source="query")
def list_assignments(payload):
    return success(assignment_service().list(status=payload.status))


@assignments_bp.route("/candidate/<candidate_id>", methods=["GET"])
def assignments_for_candidate(candidate_id):
    return success(assignment_service().list_by_candidate(parse_id(candidate_id, "candidate")))


@assignments_bp.route("/job-order/<job_order_id>", methods=["GET"])
def assignments_for_job_order(job_order_id):
    return success(assignment_service().list_by_job_order(parse_id(job_order_id, "job order")))


@assignments_bp.route("", methods=["POST"])
@validate(AssignmentCreate)
def create_assignment(payload):
    assignment = assignment_service().create(payload)
    return success(assignment, status=201, message="Assignment created successfully")


@assignments_bp.route("/<assignment_id>/status", methods=["PUT"])
@validate(AssignmentStatusUpdate)
def update_assignment_status(assignment_id, payload):
    """Move an assignment through its lifecycle; ``placed`` fills the job order."""
    assignment = assignment_service().update_status(parse_id(assignment_id, "assignment"), payload)
    return success(assignment, message="Assignment status updated successfully")
