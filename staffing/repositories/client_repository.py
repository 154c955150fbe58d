from sqlalchemy import and_, case, func

from staffing.models import Client, JobOrder

from .base import Repository


class ClientRepository(Repository):
    model = Client

    def find_by_company_name(self, company_name, exclude_id=None):
        query = self.session.query(Client).filter(Client.company_name == company_name)
        if exclude_id is not None:
            query = query.filter(Client.id != exclude_id)
        return query.first()

    def active_with_open_jobs(self):
        """Active clients with their count of open job orders, by company name."""
        return (
            self.session.query(Client, func.count(JobOrder.id).label("open_jobs"))
            .outerjoin(JobOrder, and_(JobOrder.client_id == Client.id, JobOrder.status == "open"))
            .filter(Client.status == "active")
            .group_by(Client.id)
            .order_by(Client.company_name)
            .all()
        )

    def active_with_job_stats(self):
        open_jobs = func.coalesce(func.sum(case((JobOrder.status == "open", 1), else_=0)), 0)
        filled_jobs = func.coalesce(func.sum(case((JobOrder.status == "filled", 1), else_=0)), 0)
        return (
            self.session.query(
                Client,
                func.count(JobOrder.id).label("total_jobs"),
                open_jobs.label("open_jobs"),
                filled_jobs.label("filled_jobs"),
            )
            .outerjoin(JobOrder, JobOrder.client_id == Client.id)
            .filter(Client.status == "active")
            .group_by(Client.id)
            .order_by(Client.company_name)
            .all()
        )

    def top_by_open_jobs(self, limit=10):
        job_count = func.count(JobOrder.id)
        return (
            self.session.query(Client.company_name, job_count.label("job_count"))
            .outerjoin(JobOrder, and_(JobOrder.client_id == Client.id, JobOrder.status == "open"))
            .filter(Client.status == "active")
            .group_by(Client.id, Client.company_name)
            .order_by(job_count.desc(), Client.company_name)
            .limit(limit)
            .all()
        )
