from datetime import datetime, timedelta

from staffing.models import Candidate, Client, JobOrder
from staffing.services.serializers import assignment_views
from staffing.services.skills import top_skills

PLACEMENT_WINDOW_DAYS = 30


class DashboardService:
    """Read-only rollups across all entities."""

    def __init__(self, candidates, clients, job_orders, assignments):
        self.candidates = candidates
        self.clients = clients
        self.job_orders = job_orders
        self.assignments = assignments

    def stats(self):
        since = datetime.utcnow() - timedelta(days=PLACEMENT_WINDOW_DAYS)
        return {
            "stats": {
                "activeCandidates": self.candidates.count(Candidate.status == "active"),
                "openJobs": self.job_orders.count(JobOrder.status == "open"),
                "activeClients": self.clients.count(Client.status == "active"),
                "totalAssignments": self.assignments.count(),
            },
            "assignmentsByStatus": [
                {"status": row.status, "count": row.total}
                for row in self.assignments.count_by_status()
            ],
            "recentPlacements": assignment_views(self.assignments.placed_since(since, limit=5)),
            "jobsByClient": [
                {"company_name": row.company_name, "job_count": row.job_count}
                for row in self.clients.top_by_open_jobs(limit=10)
            ],
            "topSkills": top_skills(self.job_orders.open_required_skills(), limit=10),
        }

    def recent_activity(self):
        return {
            "recentCandidates": [
                {
                    "id": c.id,
                    "first_name": c.first_name,
                    "last_name": c.last_name,
                    "email": c.email,
                    "skills": c.skills,
                    "created_at": c.created_at.isoformat() if c.created_at else None,
                }
                for c in self.candidates.recent(limit=5)
            ],
            "recentJobOrders": [
                {
                    "id": jo.id,
                    "title": jo.title,
                    "company_name": client.company_name,
                    "created_at": jo.created_at.isoformat() if jo.created_at else None,
                }
                for jo, client in self.job_orders.recent(limit=5)
            ],
            "recentAssignments": assignment_views(self.assignments.recent(limit=10)),
        }
