from sqlalchemy.exc import OperationalError

from staffing.repositories import CandidateRepository

CANDIDATE = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@x.com"}


def test_duplicate_caught_by_the_database_is_a_conflict(client, monkeypatch):
    assert client.post("/api/candidates", json=CANDIDATE).status_code == 201

    # the pre-insert lookup misses, as when another request inserts first
    monkeypatch.setattr(CandidateRepository, "find_by_email", lambda self, email, exclude_id=None: None)
    r = client.post("/api/candidates", json=CANDIDATE)

    assert r.status_code == 409
    assert r.get_json() == {"success": False, "error": "Resource conflicts with existing data"}


def test_session_usable_after_integrity_error(client, monkeypatch):
    client.post("/api/candidates", json=CANDIDATE)
    monkeypatch.setattr(CandidateRepository, "find_by_email", lambda self, email, exclude_id=None: None)
    client.post("/api/candidates", json=CANDIDATE)
    monkeypatch.undo()

    r = client.post("/api/candidates", json={**CANDIDATE, "email": "other@x.com"})
    assert r.status_code == 201


def test_store_failure_is_a_generic_500(client, monkeypatch):
    def unavailable(self, criteria):
        raise OperationalError("SELECT candidates", {}, Exception("server has gone away"))

    monkeypatch.setattr(CandidateRepository, "search", unavailable)
    r = client.get("/api/candidates")

    assert r.status_code == 500
    assert r.get_json() == {
        "success": False,
        "message": "Internal server error",
        "error": "Something went wrong",
    }


def test_store_failure_detail_in_debug(app, client, monkeypatch):
    app.debug = True

    def unavailable(self, criteria):
        raise OperationalError("SELECT candidates", {}, Exception("server has gone away"))

    monkeypatch.setattr(CandidateRepository, "search", unavailable)
    body = client.get("/api/candidates").get_json()
    assert "server has gone away" in body["error"]
