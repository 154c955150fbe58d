import itertools

import pytest

from config import TestConfig
from staffing import create_app
from staffing.extensions import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def new_client(client):
    """POST a client and return its data."""
    counter = itertools.count(1)

    def _create(company_name=None, **fields):
        company_name = company_name or f"Acme Staffing {next(counter)}"
        payload = {"company_name": company_name, "contact_person": "Jane Roe", **fields}
        r = client.post("/api/clients", json=payload)
        assert r.status_code == 201, r.get_json()
        return r.get_json()["data"]
    return _create


@pytest.fixture
def new_candidate(client):
    def _create(email="a@x.com", **fields):
        payload = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": email,
            "skills": "Python, SQL",
            "experience_years": 4,
            **fields,
        }
        r = client.post("/api/candidates", json=payload)
        assert r.status_code == 201, r.get_json()
        return r.get_json()["data"]
    return _create


@pytest.fixture
def new_job_order(client, new_client):
    def _create(client_id=None, title="Backend Developer", **fields):
        if client_id is None:
            client_id = new_client()["id"]
        payload = {"title": title, "client_id": client_id, "required_skills": "Python, SQL", **fields}
        r = client.post("/api/job-orders", json=payload)
        assert r.status_code == 201, r.get_json()
        return r.get_json()["data"]
    return _create
