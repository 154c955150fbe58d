from staffing.models import Client, JobOrder

from .base import Repository


class JobOrderRepository(Repository):
    model = JobOrder

    def _with_client(self):
        return self.session.query(JobOrder, Client).join(Client, JobOrder.client_id == Client.id)

    def list(self, status=None, client_id=None):
        query = self._with_client()
        if status:
            query = query.filter(JobOrder.status == status)
        if client_id:
            query = query.filter(JobOrder.client_id == client_id)
        return query.order_by(JobOrder.created_at.desc(), JobOrder.id.desc()).all()

    def get_with_client(self, job_order_id):
        """``(job_order, client)`` or ``None``."""
        return self._with_client().filter(JobOrder.id == job_order_id).first()

    def for_client(self, client_id):
        return (
            self.session.query(JobOrder)
            .filter(JobOrder.client_id == client_id)
            .order_by(JobOrder.created_at.desc(), JobOrder.id.desc())
            .all()
        )

    def open_required_skills(self):
        rows = (
            self.session.query(JobOrder.required_skills)
            .filter(JobOrder.status == "open")
            .order_by(JobOrder.id)
            .all()
        )
        return [skills for (skills,) in rows]

    def set_status(self, job_order_id, status):
        return (
            self.session.query(JobOrder)
            .filter(JobOrder.id == job_order_id)
            .update({"status": status}, synchronize_session="fetch")
        )

    def recent(self, limit=5):
        return self._with_client().order_by(JobOrder.created_at.desc(), JobOrder.id.desc()).limit(limit).all()
