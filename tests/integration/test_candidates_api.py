def test_create_candidate_lowercases_email(client):
    r = client.post("/api/candidates", json={
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "Ada@Example.COM",
    })
    assert r.status_code == 201
    body = r.get_json()
    assert body["success"] is True
    assert body["message"] == "Candidate created successfully"
    assert body["data"]["email"] == "ada@example.com"
    assert body["data"]["status"] == "active"


def test_duplicate_email_conflicts_regardless_of_case(client, new_candidate):
    new_candidate(email="dup@x.com")
    r = client.post("/api/candidates", json={
        "first_name": "Other",
        "last_name": "Person",
        "email": "DUP@x.com",
    })
    assert r.status_code == 409
    assert r.get_json() == {"success": False, "error": "A candidate with this email already exists"}


def test_validation_failure_envelope(client):
    r = client.post("/api/candidates", json={"first_name": "A"})
    assert r.status_code == 400
    body = r.get_json()
    assert body["success"] is False
    assert body["error"] == "Validation failed"
    assert {d["field"] for d in body["details"]} == {"first_name", "last_name", "email"}


def test_get_candidate_not_found(client):
    r = client.get("/api/candidates/999")
    assert r.status_code == 404
    assert r.get_json()["error"] == "Candidate not found"


def test_get_candidate_with_non_numeric_id(client):
    r = client.get("/api/candidates/abc")
    assert r.status_code == 400
    assert r.get_json()["error"] == "Valid candidate ID is required"


def test_get_candidate_includes_assignment_summary(client, new_candidate, new_job_order):
    candidate = new_candidate()
    job = new_job_order(title="Data Engineer")
    client.post("/api/assignments", json={"candidate_id": candidate["id"], "job_order_id": job["id"]})

    data = client.get(f"/api/candidates/{candidate['id']}").get_json()["data"]
    assert data["assignment_count"] == 1
    assert data["project_names"] == ["Data Engineer"]


def test_partial_update_leaves_other_fields(client, new_candidate):
    candidate = new_candidate(phone="+1 555 000 1111")
    r = client.put(f"/api/candidates/{candidate['id']}", json={"skills": "Rust"})
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["skills"] == "Rust"
    assert data["phone"] == "+1 555 000 1111"
    assert data["first_name"] == candidate["first_name"]
    assert data["experience_years"] == candidate["experience_years"]


def test_empty_update_is_rejected(client, new_candidate):
    candidate = new_candidate()
    r = client.put(f"/api/candidates/{candidate['id']}", json={})
    assert r.status_code == 400
    assert r.get_json()["details"][0]["type"] == "object_min"


def test_update_missing_candidate(client):
    r = client.put("/api/candidates/77", json={"skills": "Go"})
    assert r.status_code == 404


def test_update_to_taken_email_conflicts(client, new_candidate):
    new_candidate(email="one@x.com")
    second = new_candidate(email="two@x.com")
    r = client.put(f"/api/candidates/{second['id']}", json={"email": "ONE@x.com"})
    assert r.status_code == 409


def test_update_keeping_own_email_is_allowed(client, new_candidate):
    candidate = new_candidate(email="me@x.com")
    r = client.put(f"/api/candidates/{candidate['id']}", json={"email": "Me@X.com", "status": "inactive"})
    assert r.status_code == 200
    assert r.get_json()["data"]["status"] == "inactive"


def test_delete_candidate_without_assignments(client, new_candidate):
    candidate = new_candidate()
    r = client.delete(f"/api/candidates/{candidate['id']}")
    assert r.status_code == 200
    assert r.get_json() == {"success": True, "message": "Candidate deleted successfully"}
    assert client.get(f"/api/candidates/{candidate['id']}").status_code == 404


def test_delete_candidate_with_assignments_is_blocked(client, new_candidate, new_job_order):
    candidate = new_candidate()
    job = new_job_order()
    client.post("/api/assignments", json={"candidate_id": candidate["id"], "job_order_id": job["id"]})

    r = client.delete(f"/api/candidates/{candidate['id']}")
    assert r.status_code == 400
    assert "existing assignments" in r.get_json()["error"]


def test_list_pages_cover_the_filtered_set(client, new_candidate):
    for i in range(7):
        new_candidate(email=f"py{i}@x.com", skills="Python, Flask")
    for i in range(3):
        new_candidate(email=f"go{i}@x.com", skills="Go")

    seen = []
    page = 1
    while True:
        body = client.get(f"/api/candidates?skills=Python&limit=3&page={page}").get_json()
        assert len(body["data"]) <= 3
        assert body["pagination"]["total"] == 7
        assert body["pagination"]["pages"] == 3
        seen.extend(c["id"] for c in body["data"])
        if page >= body["pagination"]["pages"]:
            break
        page += 1

    assert len(seen) == 7
    assert len(set(seen)) == 7


def test_list_filters_by_status_and_experience(client, new_candidate):
    new_candidate(email="junior@x.com", experience_years=1)
    new_candidate(email="senior@x.com", experience_years=12)
    new_candidate(email="gone@x.com", experience_years=12, status="inactive")

    body = client.get("/api/candidates?status=active&experience_min=10").get_json()
    assert [c["email"] for c in body["data"]] == ["senior@x.com"]
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 1, "pages": 1}


def test_list_search_matches_names(client, new_candidate):
    new_candidate(email="ada@x.com")
    new_candidate(email="bob@x.com", first_name="Bob", last_name="Builder")
    body = client.get("/api/candidates?search=Builder").get_json()
    assert [c["email"] for c in body["data"]] == ["bob@x.com"]


def test_invalid_query_parameters(client):
    r = client.get("/api/candidates?limit=500")
    assert r.status_code == 400
    body = r.get_json()
    assert body["error"] == "Invalid query parameters"
    assert body["details"][0]["field"] == "limit"


def test_skill_search_ranks_by_occurrences(client, new_candidate):
    new_candidate(email="js@x.com", skills="JavaScript, Java, Python", experience_years=2)
    new_candidate(email="java@x.com", skills="Java", experience_years=9)
    new_candidate(email="py@x.com", skills="Python", experience_years=5)

    body = client.get("/api/candidates/search/skills?skills=Java").get_json()
    assert body["count"] == 2
    assert [c["email"] for c in body["data"]] == ["js@x.com", "java@x.com"]
    assert body["data"][0]["skill_match_score"] == 2
    assert body["data"][1]["skill_match_score"] == 1


def test_skill_search_breaks_ties_by_experience(client, new_candidate):
    new_candidate(email="low@x.com", skills="Go", experience_years=1)
    new_candidate(email="high@x.com", skills="Go", experience_years=8)
    body = client.get("/api/candidates/search/skills?skills=go").get_json()
    assert [c["email"] for c in body["data"]] == ["high@x.com", "low@x.com"]


def test_skill_search_requires_keyword(client):
    r = client.get("/api/candidates/search/skills")
    assert r.status_code == 400
    assert r.get_json()["error"] == "Skills parameter is required for search"


def test_skill_search_respects_experience_range(client, new_candidate):
    new_candidate(email="a1@x.com", skills="SQL", experience_years=1)
    new_candidate(email="a2@x.com", skills="SQL", experience_years=6)
    body = client.get("/api/candidates/search/skills?skills=SQL&min_experience=5").get_json()
    assert [c["email"] for c in body["data"]] == ["a2@x.com"]


def test_statistics(client, new_candidate):
    new_candidate(email="s1@x.com", skills="Python", experience_years=1)
    new_candidate(email="s2@x.com", skills="Python", experience_years=3)
    new_candidate(email="s3@x.com", skills="Go", experience_years=11, status="inactive")

    data = client.get("/api/candidates/stats").get_json()["data"]
    assert data["total_candidates"] == 3
    assert data["active_candidates"] == 2
    active = next(s for s in data["status_distribution"] if s["status"] == "active")
    assert active == {"status": "active", "count": 2, "avg_experience": 2.0}
    assert data["popular_skills"] == [{"skills": "Python", "count": 2}]
    assert data["experience_distribution"] == [
        {"experience_range": "0-2 years", "count": 1},
        {"experience_range": "2-5 years", "count": 1},
    ]


def test_count_by_status(client, new_candidate):
    new_candidate(email="c1@x.com")
    new_candidate(email="c2@x.com", status="placed")
    data = client.get("/api/candidates/count-by-status").get_json()["data"]
    assert data["total"] == 2
    assert sorted(c["status"] for c in data["counts"]) == ["active", "placed"]


def test_bulk_status_update(client, new_candidate):
    ids = [new_candidate(email=f"b{i}@x.com")["id"] for i in range(3)]
    r = client.post("/api/candidates/bulk-status", json={"candidate_ids": ids[:2] + [999], "status": "inactive"})
    assert r.status_code == 200
    body = r.get_json()
    assert body["affected_rows"] == 2
    assert body["updated_ids"] == ids[:2] + [999]
    assert client.get(f"/api/candidates/{ids[0]}").get_json()["data"]["status"] == "inactive"
    assert client.get(f"/api/candidates/{ids[2]}").get_json()["data"]["status"] == "active"


def test_bulk_status_update_with_no_matches(client):
    r = client.post("/api/candidates/bulk-status", json={"candidate_ids": [41, 42], "status": "inactive"})
    assert r.status_code == 404
    assert r.get_json()["error"] == "No candidates found with the provided IDs"


def test_resume_url_round_trips_unchanged(client, new_candidate):
    created = new_candidate(resume_url="https://cv.example.com")
    assert created["resume_url"] == "https://cv.example.com"
    fetched = client.get(f"/api/candidates/{created['id']}").get_json()["data"]
    assert fetched["resume_url"] == "https://cv.example.com"


def test_statistics_counts_missing_experience_as_ten_plus(client, new_candidate):
    new_candidate(email="n1@x.com", experience_years=None)
    new_candidate(email="n2@x.com", experience_years=3)

    data = client.get("/api/candidates/stats").get_json()["data"]
    assert data["experience_distribution"] == [
        {"experience_range": "10+ years", "count": 1},
        {"experience_range": "2-5 years", "count": 1},
    ]
