from staffing.repositories.query_builder import candidate_filters, page_offset, pagination_meta
from staffing.schemas import CandidateSearch


def _sql(predicate):
    return str(predicate)


def test_no_criteria_no_filters():
    assert candidate_filters(CandidateSearch()) == []


def test_filters_follow_a_fixed_order():
    criteria = CandidateSearch(
        search="ada",
        skills="python",
        status="active",
        experience_min=0,
        experience_max=10,
    )
    sql = [_sql(f) for f in candidate_filters(criteria)]
    assert len(sql) == 5
    assert "candidates.first_name LIKE" in sql[0] and "candidates.email LIKE" in sql[0]
    assert "candidates.skills LIKE" in sql[1]
    assert "candidates.status =" in sql[2]
    assert "candidates.experience_years >=" in sql[3]
    assert "candidates.experience_years <=" in sql[4]


def test_zero_experience_min_is_still_applied():
    assert len(candidate_filters(CandidateSearch(experience_min=0))) == 1


def test_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 25) == 50


def test_pagination_meta_rounds_pages_up():
    assert pagination_meta(1, 10, 0) == {"page": 1, "limit": 10, "total": 0, "pages": 0}
    assert pagination_meta(2, 10, 21)["pages"] == 3
    assert pagination_meta(1, 7, 7)["pages"] == 1
