"""Filter and pagination helpers shared by the list endpoints.

The same ordered list of predicates is applied to the page query and to the
count query, so ``total`` always describes the filtered set being paged.
"""
import math

from sqlalchemy import or_

from staffing.models import Candidate


def candidate_filters(criteria):
    """Build the WHERE predicates for a candidate search, in a fixed order."""
    filters = []

    if criteria.search:
        term = f"%{criteria.search}%"
        filters.append(
            or_(
                Candidate.first_name.like(term),
                Candidate.last_name.like(term),
                Candidate.email.like(term),
                Candidate.skills.like(term),
            )
        )

    if criteria.skills:
        filters.append(Candidate.skills.like(f"%{criteria.skills}%"))

    if criteria.status:
        filters.append(Candidate.status == criteria.status)

    if criteria.experience_min is not None:
        filters.append(Candidate.experience_years >= criteria.experience_min)

    if criteria.experience_max is not None:
        filters.append(Candidate.experience_years <= criteria.experience_max)

    return filters


def page_offset(page, limit):
    return (page - 1) * limit


def count_matching(count_query, filters):
    return count_query.filter(*filters).scalar() or 0


def fetch_page(query, filters, page, limit):
    return query.filter(*filters).limit(limit).offset(page_offset(page, limit)).all()


def pagination_meta(page, limit, total):
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) if limit else 0,
    }
