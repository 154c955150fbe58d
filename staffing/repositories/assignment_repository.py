from sqlalchemy import func

from staffing.models import Assignment, Candidate, Client, JobOrder

from .base import Repository


class AssignmentRepository(Repository):
    model = Assignment

    def _joined(self):
        # (assignment, candidate, job_order, client) rows
        return (
            self.session.query(Assignment, Candidate, JobOrder, Client)
            .join(Candidate, Assignment.candidate_id == Candidate.id)
            .join(JobOrder, Assignment.job_order_id == JobOrder.id)
            .join(Client, JobOrder.client_id == Client.id)
        )

    def _newest_first(self, query):
        return query.order_by(Assignment.assigned_date.desc(), Assignment.id.desc())

    def list(self, status=None):
        query = self._joined()
        if status:
            query = query.filter(Assignment.status == status)
        return self._newest_first(query).all()

    def get_joined(self, assignment_id):
        return self._joined().filter(Assignment.id == assignment_id).first()

    def for_candidate(self, candidate_id):
        return self._newest_first(self._joined().filter(Assignment.candidate_id == candidate_id)).all()

    def for_job_order(self, job_order_id):
        return self._newest_first(self._joined().filter(Assignment.job_order_id == job_order_id)).all()

    def find_pair(self, candidate_id, job_order_id):
        return (
            self.session.query(Assignment)
            .filter(Assignment.candidate_id == candidate_id, Assignment.job_order_id == job_order_id)
            .first()
        )

    def exists_for_candidate(self, candidate_id):
        return self.count(Assignment.candidate_id == candidate_id) > 0

    def count_by_status(self):
        count = func.count(Assignment.id)
        return (
            self.session.query(Assignment.status, count.label("total"))
            .group_by(Assignment.status)
            .order_by(count.desc())
            .all()
        )

    def placed_since(self, since, limit=5):
        query = self._joined().filter(Assignment.status == "placed", Assignment.updated_at >= since)
        return query.order_by(Assignment.updated_at.desc(), Assignment.id.desc()).limit(limit).all()

    def recent(self, limit=10):
        return self._newest_first(self._joined()).limit(limit).all()
