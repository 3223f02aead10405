"""
Tests for pledge submission and counting.
"""
from pledge_api.models import Pledge


class TestPledgeEndpoints:
    """Test /api/pledges and /api/pledges-count."""

    def test_create_pledge(self, client, db, make_campaign):
        make_campaign("pilot_v1", threshold=10)

        response = client.post(
            "/api/pledges",
            json={"name": "Ada", "email": "ada@example.com", "city": "London"},
        )

        assert response.status_code == 201
        data = response.json()
        assert "id" in data
        assert "created_at" in data

        pledge = db.get(Pledge, data["id"])
        assert pledge.campaign == "pilot_v1"
        assert pledge.city == "London"
        assert pledge.country is None
        assert pledge.notified_at is None

    def test_create_pledge_for_named_campaign(self, client, db, make_campaign):
        make_campaign("pilot_v1", threshold=10)
        make_campaign("spring", threshold=10)

        response = client.post(
            "/api/pledges",
            json={"name": "Ada", "email": "ada@example.com", "pledge_campaign": "spring"},
        )

        assert response.status_code == 201
        assert db.get(Pledge, response.json()["id"]).campaign == "spring"

    def test_create_pledge_requires_name_and_email(self, client, make_campaign):
        make_campaign("pilot_v1", threshold=10)

        response = client.post("/api/pledges", json={"name": "Ada", "email": "  "})

        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}

    def test_create_pledge_without_body(self, client, db, make_campaign):
        make_campaign("pilot_v1", threshold=10)

        response = client.post("/api/pledges")

        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}
        assert db.query(Pledge).count() == 0

    def test_create_pledge_non_string_fields(self, client, make_campaign):
        make_campaign("pilot_v1", threshold=10)

        response = client.post("/api/pledges", json={"name": 123, "email": ["ada@example.com"]})

        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}

    def test_create_pledge_non_object_body(self, client, make_campaign):
        make_campaign("pilot_v1", threshold=10)

        response = client.post("/api/pledges", json=["Ada", "ada@example.com"])

        assert response.status_code == 400

    def test_create_pledge_unknown_campaign(self, client):
        response = client.post(
            "/api/pledges",
            json={"name": "Ada", "email": "ada@example.com", "pledge_campaign": "nope"},
        )
        assert response.status_code == 404

    def test_get_method_not_allowed(self, client):
        response = client.get("/api/pledges")
        assert response.status_code == 405

    def test_pledge_count(self, client, make_campaign, add_pledges):
        make_campaign("pilot_v1", threshold=10)
        make_campaign("spring", threshold=10)
        add_pledges("pilot_v1", ["a@example.com", "b@example.com"])
        add_pledges("spring", ["c@example.com"])

        assert client.get("/api/pledges-count").json() == {"count": 2}
        assert client.get("/api/pledges-count", params={"campaign": "spring"}).json() == {"count": 1}
        assert client.get("/api/pledges-count", params={"campaign": "none"}).json() == {"count": 0}

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
