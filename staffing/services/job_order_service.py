import logging

from staffing.errors import NotFoundError
from staffing.models import JobOrder
from staffing.repositories import unit_of_work
from staffing.services.serializers import job_order_view

logger = logging.getLogger(__name__)


class JobOrderService:
    def __init__(self, job_orders, clients, assignments):
        self.job_orders = job_orders
        self.clients = clients
        self.assignments = assignments

    @property
    def session(self):
        return self.job_orders.session

    def _view(self, job_order_id, with_contact=False):
        row = self.job_orders.get_with_client(job_order_id)
        if row is None:
            raise NotFoundError("Job order not found")
        return job_order_view(*row, with_contact=with_contact)

    def list(self, status=None, client_id=None):
        return [job_order_view(jo, client) for jo, client in self.job_orders.list(status=status, client_id=client_id)]

    def list_open(self):
        return self.list(status="open")

    def get(self, job_order_id):
        data = self._view(job_order_id, with_contact=True)
        data["assignments"] = [
            dict(
                assignment.to_dict(),
                first_name=candidate.first_name,
                last_name=candidate.last_name,
                email=candidate.email,
                skills=candidate.skills,
            )
            for assignment, candidate, _, _ in self.assignments.for_job_order(job_order_id)
        ]
        return data

    def create(self, payload):
        client = self.clients.get(payload.client_id)
        if client is None or client.status != "active":
            raise NotFoundError("Client not found or inactive")

        with unit_of_work(self.session):
            job_order = self.job_orders.add(JobOrder(**payload.model_dump()))

        logger.info("✅ Job order %s created for client %s", job_order.id, client.id)
        return self._view(job_order.id)

    def update(self, job_order_id, payload):
        job_order = self.job_orders.get(job_order_id)
        if job_order is None:
            raise NotFoundError("Job order not found")

        # no transition guard, a filled order may be reopened
        with unit_of_work(self.session):
            self.job_orders.apply_patch(job_order, payload.model_dump())

        logger.info("Job order %s updated (status=%s)", job_order_id, payload.status)
        return self._view(job_order_id)
