import logging

from staffing.errors import ConflictError, NotFoundError, StateError
from staffing.models import Assignment
from staffing.repositories import unit_of_work
from staffing.services.serializers import assignment_view, assignment_views

logger = logging.getLogger(__name__)


class AssignmentService:
    """Links candidates to job orders and tracks them until placement.

    Reaching ``placed`` also marks the job order ``filled``; both writes share
    one transaction so the two rows never disagree.
    """

    def __init__(self, assignments, candidates, job_orders):
        self.assignments = assignments
        self.candidates = candidates
        self.job_orders = job_orders

    @property
    def session(self):
        return self.assignments.session

    def _view(self, assignment_id):
        row = self.assignments.get_joined(assignment_id)
        if row is None:
            raise NotFoundError("Assignment not found")
        return assignment_view(*row)

    def _fill_job_order(self, job_order_id):
        self.job_orders.set_status(job_order_id, "filled")
        logger.info("Job order %s marked filled after placement", job_order_id)

    def list(self, status=None):
        return assignment_views(self.assignments.list(status=status))

    def list_by_candidate(self, candidate_id):
        return assignment_views(self.assignments.for_candidate(candidate_id))

    def list_by_job_order(self, job_order_id):
        return assignment_views(self.assignments.for_job_order(job_order_id))

    def create(self, payload):
        # checked in order, the first failure wins
        candidate = self.candidates.get(payload.candidate_id)
        if candidate is None:
            raise NotFoundError("Candidate not found")
        if candidate.status != "active":
            raise StateError("Cannot assign inactive candidate")

        job_order = self.job_orders.get(payload.job_order_id)
        if job_order is None:
            raise NotFoundError("Job order not found")
        if job_order.status != "open":
            raise StateError("Cannot assign to closed or filled job order")

        if self.assignments.find_pair(payload.candidate_id, payload.job_order_id):
            logger.warning(
                "Duplicate assignment rejected: candidate %s, job order %s",
                payload.candidate_id, payload.job_order_id,
            )
            raise ConflictError("Candidate already assigned to this job order")

        data = payload.model_dump(exclude_none=True)
        with unit_of_work(self.session):
            assignment = self.assignments.add(Assignment(**data))
            if assignment.status == "placed":
                self._fill_job_order(assignment.job_order_id)

        logger.info(
            "✅ Assignment %s created: candidate %s -> job order %s",
            assignment.id, assignment.candidate_id, assignment.job_order_id,
        )
        return self._view(assignment.id)

    def update_status(self, assignment_id, payload):
        assignment = self.assignments.get(assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found")

        patch = payload.model_dump(include=payload.model_fields_set | {"status"})
        with unit_of_work(self.session):
            self.assignments.apply_patch(assignment, patch)
            if payload.status == "placed":
                self._fill_job_order(assignment.job_order_id)

        logger.info("Assignment %s moved to '%s'", assignment_id, payload.status)
        return self._view(assignment_id)
