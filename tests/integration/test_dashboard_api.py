def test_dashboard_stats(client, new_client, new_candidate, new_job_order):
    globex = new_client(company_name="Globex")
    new_client(company_name="Quiet Co")
    job = new_job_order(client_id=globex["id"], title="Backend", required_skills="Python, SQL")
    new_job_order(client_id=globex["id"], title="Data", required_skills="SQL, Spark")
    new_job_order(client_id=globex["id"], title="Old", required_skills="COBOL", status="closed")
    candidate = new_candidate(email="p@x.com")
    new_candidate(email="q@x.com", status="inactive")

    assignment = client.post(
        "/api/assignments", json={"candidate_id": candidate["id"], "job_order_id": job["id"]}
    ).get_json()["data"]
    client.put(f"/api/assignments/{assignment['id']}/status", json={"status": "placed"})

    data = client.get("/api/dashboard/stats").get_json()["data"]
    assert data["stats"] == {
        "activeCandidates": 1,
        "openJobs": 1,
        "activeClients": 2,
        "totalAssignments": 1,
    }
    assert data["assignmentsByStatus"] == [{"status": "placed", "count": 1}]
    assert [p["id"] for p in data["recentPlacements"]] == [assignment["id"]]
    assert data["jobsByClient"][0] == {"company_name": "Globex", "job_count": 1}
    assert data["topSkills"] == [
        {"skill": "SQL", "count": 1},
        {"skill": "Spark", "count": 1},
    ]


def test_top_skills_counts_across_open_orders(client, new_job_order, new_client):
    acme = new_client()
    new_job_order(client_id=acme["id"], title="One", required_skills="Python, SQL")
    new_job_order(client_id=acme["id"], title="Two", required_skills="SQL , Docker")
    top = client.get("/api/dashboard/stats").get_json()["data"]["topSkills"]
    assert top[0] == {"skill": "SQL", "count": 2}
    assert [s["skill"] for s in top[1:]] == ["Python", "Docker"]


def test_recent_activity(client, new_candidate, new_job_order):
    for i in range(6):
        new_candidate(email=f"r{i}@x.com")
    new_job_order(title="Latest")

    data = client.get("/api/dashboard/recent-activity").get_json()["data"]
    assert len(data["recentCandidates"]) == 5
    assert data["recentCandidates"][0]["email"] == "r5@x.com"
    assert data["recentJobOrders"][0]["title"] == "Latest"
    assert data["recentAssignments"] == []
