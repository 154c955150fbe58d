from sqlalchemy import func

from staffing.models import Assignment, Candidate, JobOrder
from .query_builder import candidate_filters, count_matching, fetch_page

from .base import Repository


class CandidateRepository(Repository):
    model = Candidate

    def search(self, criteria):
        """Return ``(rows, total)`` for one page of the filtered candidate list."""
        filters = candidate_filters(criteria)
        query = self.session.query(Candidate).order_by(Candidate.created_at.desc(), Candidate.id.desc())
        total = count_matching(self.session.query(func.count(Candidate.id)), filters)
        rows = fetch_page(query, filters, criteria.page, criteria.limit)
        return rows, total

    def find_by_email(self, email, exclude_id=None):
        query = self.session.query(Candidate).filter(func.lower(Candidate.email) == email.lower())
        if exclude_id is not None:
            query = query.filter(Candidate.id != exclude_id)
        return query.first()

    def assignment_summary(self, candidate_id):
        """Number of assignments and distinct job titles the candidate is assigned to."""
        rows = (
            self.session.query(JobOrder.title)
            .join(Assignment, Assignment.job_order_id == JobOrder.id)
            .filter(Assignment.candidate_id == candidate_id)
            .order_by(Assignment.id)
            .all()
        )
        titles = []
        for (title,) in rows:
            if title not in titles:
                titles.append(title)
        return len(rows), titles

    def active_with_skill(self, keyword, min_experience, max_experience):
        return (
            self.session.query(Candidate)
            .filter(
                func.lower(Candidate.skills).like(f"%{keyword.lower()}%"),
                Candidate.experience_years.between(min_experience, max_experience),
                Candidate.status == "active",
            )
            .all()
        )

    def status_distribution(self):
        count = func.count(Candidate.id)
        return (
            self.session.query(
                Candidate.status,
                count.label("total"),
                func.avg(Candidate.experience_years).label("avg_experience"),
            )
            .group_by(Candidate.status)
            .order_by(count.desc())
            .all()
        )

    def popular_skills(self, limit=10):
        count = func.count(Candidate.id)
        return (
            self.session.query(Candidate.skills, count.label("total"))
            .filter(Candidate.status == "active")
            .group_by(Candidate.skills)
            .order_by(count.desc())
            .limit(limit)
            .all()
        )

    def active_experience_values(self):
        rows = (
            self.session.query(Candidate.experience_years)
            .filter(Candidate.status == "active")
            .all()
        )
        return [float(value) if value is not None else None for (value,) in rows]

    def bulk_update_status(self, candidate_ids, status):
        """Returns the number of matched rows."""
        return (
            self.session.query(Candidate)
            .filter(Candidate.id.in_(candidate_ids))
            .update({"status": status}, synchronize_session="fetch")
        )

    def recent(self, limit=5):
        return (
            self.session.query(Candidate)
            .order_by(Candidate.created_at.desc(), Candidate.id.desc())
            .limit(limit)
            .all()
        )
