from flask import Blueprint

from staffing.responses import success
from staffing.schemas import BulkStatusUpdate, CandidateCreate, CandidateSearch, CandidateUpdate, SkillSearch
from staffing.services import candidate_service
from staffing.validation import parse_id, validate

candidates_bp = Blueprint("candidates_api", __name__, url_prefix="/api/candidates")


@candidates_bp.route("", methods=["GET"])
@validate(CandidateSearch, source="query")
def list_candidates(payload):
    """Search, filter and paginate candidates."""
    candidates, pagination = candidate_service().list(payload)
    return success(candidates, pagination=pagination)


@candidates_bp.route("/stats", methods=["GET"])
def candidate_statistics():
    return success(candidate_service().statistics())


@candidates_bp.route("/count-by-status", methods=["GET"])
def candidate_count_by_status():
    return success(candidate_service().count_by_status())


@candidates_bp.route("/search/skills", methods=["GET"])
@validate(SkillSearch, source="query")
def search_by_skills(payload):
    results = candidate_service().search_by_skills(payload)
    return success(results, count=len(results))


@candidates_bp.route("/<candidate_id>", methods=["GET"])
def get_candidate(candidate_id):
    return success(candidate_service().get(parse_id(candidate_id, "candidate")))


@candidates_bp.route("", methods=["POST"])
@validate(CandidateCreate)
def create_candidate(payload):
    candidate = candidate_service().create(payload)
    return success(candidate, status=201, message="Candidate created successfully")


@candidates_bp.route("/bulk-status", methods=["POST"])
@validate(BulkStatusUpdate)
def bulk_update_status(payload):
    result = candidate_service().bulk_update_status(payload)
    return success(**result)


@candidates_bp.route("/<candidate_id>", methods=["PUT"])
@validate(CandidateUpdate)
def update_candidate(candidate_id, payload):
    """Partial update: only the fields present in the body are changed."""
    candidate_id = parse_id(candidate_id, "candidate")
    candidate = candidate_service().update(candidate_id, payload.to_patch())
    return success(candidate, message="Candidate updated successfully")


@candidates_bp.route("/<candidate_id>", methods=["DELETE"])
def delete_candidate(candidate_id):
    candidate_service().delete(parse_id(candidate_id, "candidate"))
    return success(message="Candidate deleted successfully")
