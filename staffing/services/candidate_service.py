import logging

from staffing.errors import ConflictError, NotFoundError, StateError, ValidationError
from staffing.models import Candidate
from staffing.repositories import unit_of_work
from staffing.repositories.query_builder import pagination_meta
from staffing.services.skills import experience_histogram, skill_match_score

logger = logging.getLogger(__name__)

SKILL_SEARCH_LIMIT = 50


class CandidateService:
    """Candidate intake, search and status management."""

    def __init__(self, candidates, assignments):
        self.candidates = candidates
        self.assignments = assignments

    @property
    def session(self):
        return self.candidates.session

    def _get_or_404(self, candidate_id):
        candidate = self.candidates.get(candidate_id)
        if candidate is None:
            raise NotFoundError("Candidate not found")
        return candidate

    def _ensure_email_free(self, email, exclude_id=None):
        if self.candidates.find_by_email(email, exclude_id=exclude_id):
            logger.warning("Duplicate candidate email rejected: %s", email)
            raise ConflictError("A candidate with this email already exists")

    def list(self, criteria):
        rows, total = self.candidates.search(criteria)
        return [c.to_dict() for c in rows], pagination_meta(criteria.page, criteria.limit, total)

    def get(self, candidate_id):
        candidate = self._get_or_404(candidate_id)
        assignment_count, project_names = self.candidates.assignment_summary(candidate_id)
        data = candidate.to_dict()
        data["assignment_count"] = assignment_count
        data["project_names"] = project_names
        return data

    def create(self, payload):
        data = payload.model_dump()
        data["email"] = data["email"].lower()
        self._ensure_email_free(data["email"])

        with unit_of_work(self.session):
            candidate = self.candidates.add(Candidate(**data))

        logger.info("✅ Candidate %s created (%s)", candidate.id, candidate.email)
        return candidate.to_dict()

    def update(self, candidate_id, patch):
        candidate = self._get_or_404(candidate_id)

        if patch.get("email"):
            patch["email"] = patch["email"].lower()
            self._ensure_email_free(patch["email"], exclude_id=candidate_id)

        if not patch:
            raise ValidationError([], error="No fields provided for update")

        with unit_of_work(self.session):
            self.candidates.apply_patch(candidate, patch)

        logger.info("Candidate %s updated: %s", candidate_id, ", ".join(sorted(patch)))
        return candidate.to_dict()

    def delete(self, candidate_id):
        candidate = self._get_or_404(candidate_id)

        if self.assignments.exists_for_candidate(candidate_id):
            raise StateError("Cannot delete candidate with existing assignments. Remove assignments first.")

        with unit_of_work(self.session):
            self.candidates.delete(candidate)

        logger.info("Candidate %s deleted", candidate_id)

    def search_by_skills(self, criteria):
        if not criteria.skills:
            raise ValidationError(
                [{"field": "skills", "message": "Field required", "type": "missing"}],
                error="Skills parameter is required for search",
            )

        keyword = criteria.skills
        matches = self.candidates.active_with_skill(keyword, criteria.min_experience, criteria.max_experience)

        results = []
        for candidate in matches:
            results.append({
                "id": candidate.id,
                "first_name": candidate.first_name,
                "last_name": candidate.last_name,
                "email": candidate.email,
                "skills": candidate.skills,
                "experience_years": candidate.to_dict()["experience_years"],
                "status": candidate.status,
                "skill_match_score": skill_match_score(candidate.skills, keyword),
            })

        results.sort(key=lambda r: (-r["skill_match_score"], -(r["experience_years"] or 0)))
        return results[:SKILL_SEARCH_LIMIT]

    def statistics(self):
        status_distribution = [
            {
                "status": row.status,
                "count": row.total,
                "avg_experience": round(float(row.avg_experience), 1) if row.avg_experience is not None else None,
            }
            for row in self.candidates.status_distribution()
        ]
        popular_skills = [
            {"skills": row.skills, "count": row.total}
            for row in self.candidates.popular_skills()
        ]

        total = sum(s["count"] for s in status_distribution)
        active = next((s["count"] for s in status_distribution if s["status"] == "active"), 0)

        return {
            "status_distribution": status_distribution,
            "popular_skills": popular_skills,
            "experience_distribution": experience_histogram(self.candidates.active_experience_values()),
            "total_candidates": total,
            "active_candidates": active,
        }

    def count_by_status(self):
        counts = [
            {"status": row.status, "count": row.total}
            for row in self.candidates.status_distribution()
        ]
        return {"counts": counts, "total": sum(c["count"] for c in counts)}

    def bulk_update_status(self, payload):
        with unit_of_work(self.session):
            affected = self.candidates.bulk_update_status(payload.candidate_ids, payload.status)

        if affected == 0:
            raise NotFoundError("No candidates found with the provided IDs")

        logger.info("Bulk status '%s' applied to %s candidates", payload.status, affected)
        return {
            "message": f"Status updated for {affected} candidates",
            "affected_rows": affected,
            "updated_ids": payload.candidate_ids,
        }
