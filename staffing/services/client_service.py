import logging

from staffing.errors import ConflictError, NotFoundError
from staffing.models import Client
from staffing.repositories import unit_of_work
from staffing.services.serializers import job_order_summary

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, clients, job_orders):
        self.clients = clients
        self.job_orders = job_orders

    @property
    def session(self):
        return self.clients.session

    def _get_or_404(self, client_id):
        client = self.clients.get(client_id)
        if client is None:
            raise NotFoundError("Client not found")
        return client

    def _ensure_name_free(self, company_name, exclude_id=None):
        if self.clients.find_by_company_name(company_name, exclude_id=exclude_id):
            logger.warning("Duplicate company name rejected: %s", company_name)
            raise ConflictError("A client with this company name already exists")

    def list(self):
        results = []
        for client, open_jobs in self.clients.active_with_open_jobs():
            data = client.to_dict()
            data["open_jobs"] = open_jobs
            results.append(data)
        return results

    def get(self, client_id):
        client = self._get_or_404(client_id)
        data = client.to_dict()
        data["job_orders"] = [job_order_summary(jo) for jo in self.job_orders.for_client(client_id)]
        return data

    def create(self, payload):
        self._ensure_name_free(payload.company_name)

        with unit_of_work(self.session):
            client = self.clients.add(Client(**payload.model_dump()))

        logger.info("✅ Client %s created (%s)", client.id, client.company_name)
        return client.to_dict()

    def update(self, client_id, patch):
        client = self._get_or_404(client_id)

        if patch.get("company_name"):
            self._ensure_name_free(patch["company_name"], exclude_id=client_id)

        with unit_of_work(self.session):
            self.clients.apply_patch(client, patch)

        logger.info("Client %s updated: %s", client_id, ", ".join(sorted(patch)))
        return client.to_dict()

    def list_with_stats(self):
        results = []
        for client, total_jobs, open_jobs, filled_jobs in self.clients.active_with_job_stats():
            data = client.to_dict()
            data.update({
                "total_jobs": total_jobs,
                "open_jobs": int(open_jobs),
                "filled_jobs": int(filled_jobs),
            })
            results.append(data)
        return results
