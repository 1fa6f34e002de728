"""Integration tests for the Holded proxy endpoints.

The app runs with the real routes, credential chain and HoldedClient; only
the network is replaced by the FakeHolded transport from conftest.
"""

import httpx
import pytest

PROJECTS_URL = "https://api.holded.com/api/projects/v1/projects"
TEAM_URL = "https://api.holded.com/api/team/v1"


class TestEmployees:
    """GET /api/v1/holded/employees"""

    def test_relays_remote_json(self, client, holded_api, holded_api_key):
        holded_api.payload = [{"id": "e1", "name": "Ana"}, {"id": "e2", "name": "Luis"}]

        response = client.get("/api/v1/holded/employees")

        assert response.status_code == 200
        assert response.json() == [{"id": "e1", "name": "Ana"}, {"id": "e2", "name": "Luis"}]
        assert str(holded_api.last_request.url) == f"{TEAM_URL}/employees"
        assert holded_api.last_request.headers["key"] == holded_api_key

    def test_remote_error_is_not_leaked(self, client, holded_api, holded_api_key):
        holded_api.status_code = 502
        holded_api.payload = {"message": "upstream secret detail"}

        response = client.get("/api/v1/holded/employees")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch employees"}
        assert "secret detail" not in response.text

    def test_transport_error_is_generic(self, client, holded_api, holded_api_key):
        holded_api.error = httpx.ConnectError("connect to 10.0.0.1 failed")

        response = client.get("/api/v1/holded/employees")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch employees"}

    def test_non_json_body_is_generic(self, client, holded_api, holded_api_key):
        holded_api.raw_body = b"<html>Bad gateway</html>"

        response = client.get("/api/v1/holded/employees")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch employees"}

    def test_missing_credential_is_generic(self, client, holded_api, no_holded_api_key):
        response = client.get("/api/v1/holded/employees")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch employees"}
        assert holded_api.requests == []


class TestProjectTimeSlots:
    """GET /api/v1/holded/project_time_slots"""

    def test_requires_project_id(self, client, holded_api, holded_api_key):
        response = client.get("/api/v1/holded/project_time_slots")

        assert response.status_code == 400
        assert response.json() == {"error": "projectId query parameter is required"}
        assert holded_api.requests == []

    def test_empty_project_id_is_missing(self, client, holded_api, holded_api_key):
        response = client.get("/api/v1/holded/project_time_slots?projectId=")

        assert response.status_code == 400
        assert holded_api.requests == []

    def test_lists_time_slots(self, client, holded_api, holded_api_key):
        holded_api.payload = [{"id": "t1", "duration": 3600}]

        response = client.get("/api/v1/holded/project_time_slots", params={"projectId": "p1"})

        assert response.status_code == 200
        assert response.json() == [{"id": "t1", "duration": 3600}]
        assert holded_api.last_request.method == "GET"
        assert str(holded_api.last_request.url) == f"{PROJECTS_URL}/p1/times"

    def test_remote_failure(self, client, holded_api, holded_api_key):
        holded_api.status_code = 404
        holded_api.payload = {"info": "Project not found"}

        response = client.get("/api/v1/holded/project_time_slots", params={"projectId": "nope"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch project time slots"}


class TestRegisterTime:
    """POST /api/v1/holded/register_time"""

    def test_forwards_numeric_duration(self, client, holded_api, holded_api_key):
        holded_api.payload = {"status": 1, "info": "Created", "id": "t42"}

        response = client.post(
            "/api/v1/holded/register_time",
            json={"projectId": "p1", "userId": "u1", "duration": "1800"},
        )

        assert response.status_code == 200
        assert response.json() == {"status": 1, "info": "Created", "id": "t42"}
        request = holded_api.last_request
        assert request.method == "POST"
        assert str(request.url) == f"{PROJECTS_URL}/p1/times"
        assert holded_api.json_body() == {"userId": "u1", "duration": 1800}

    def test_accepts_numeric_duration(self, client, holded_api, holded_api_key):
        client.post(
            "/api/v1/holded/register_time",
            json={"projectId": "p1", "userId": "u1", "duration": 3600},
        )

        assert holded_api.json_body() == {"userId": "u1", "duration": 3600}

    @pytest.mark.parametrize("missing", ["projectId", "userId", "duration"])
    def test_missing_field_is_rejected_without_remote_call(
        self, client, holded_api, holded_api_key, missing
    ):
        body = {"projectId": "p1", "userId": "u1", "duration": 60}
        del body[missing]

        response = client.post("/api/v1/holded/register_time", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Required parameters: projectId, userId, duration"}
        assert holded_api.requests == []

    def test_null_duration_is_missing(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/register_time",
            json={"projectId": "p1", "userId": "u1", "duration": None},
        )

        assert response.status_code == 400
        assert holded_api.requests == []

    def test_zero_duration_is_forwarded(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/register_time",
            json={"projectId": "p1", "userId": "u1", "duration": 0},
        )

        assert response.status_code == 200
        assert holded_api.json_body() == {"userId": "u1", "duration": 0}

    def test_non_numeric_duration_is_rejected(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/register_time",
            json={"projectId": "p1", "userId": "u1", "duration": "half an hour"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "duration must be a number"}
        assert holded_api.requests == []

    def test_missing_body(self, client, holded_api, holded_api_key):
        response = client.post("/api/v1/holded/register_time")

        assert response.status_code == 400
        assert holded_api.requests == []

    @pytest.mark.parametrize("payload", [["p1", "u1", 60], "p1", 60])
    def test_non_object_body_counts_as_empty(
        self, client, holded_api, holded_api_key, payload
    ):
        response = client.post("/api/v1/holded/register_time", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Required parameters: projectId, userId, duration"}
        assert holded_api.requests == []

    def test_snake_case_ids_are_not_accepted(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/register_time",
            json={"project_id": "p1", "user_id": "u1", "duration": 60},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Required parameters: projectId, userId, duration"}
        assert holded_api.requests == []

    def test_malformed_json(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/register_time",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert holded_api.requests == []

    def test_remote_failure(self, client, holded_api, holded_api_key):
        holded_api.status_code = 500
        holded_api.payload = {"error": "Traceback (most recent call last)"}

        response = client.post(
            "/api/v1/holded/register_time",
            json={"projectId": "p1", "userId": "u1", "duration": 60},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to register time slot"}


class TestProjects:
    """GET /api/v1/holded/projects"""

    def test_empty_filters_are_omitted(self, client, holded_api, holded_api_key):
        holded_api.payload = [{"id": "p1", "name": "Acme"}]

        response = client.get("/api/v1/holded/projects?status=&name=Acme")

        assert response.status_code == 200
        assert response.json() == [{"id": "p1", "name": "Acme"}]
        assert holded_api.last_request.url.query == b"name=Acme"

    def test_forwards_all_filters(self, client, holded_api, holded_api_key):
        client.get(
            "/api/v1/holded/projects",
            params={"archived": "false", "customerId": "c7", "page": "2", "limit": "25"},
        )

        assert dict(holded_api.last_request.url.params) == {
            "archived": "false",
            "customerId": "c7",
            "page": "2",
            "limit": "25",
        }

    def test_first_value_wins_for_repeated_keys(self, client, holded_api, holded_api_key):
        client.get("/api/v1/holded/projects?page=1&page=2")

        assert holded_api.last_request.url.query == b"page=1"

    def test_no_filters(self, client, holded_api, holded_api_key):
        client.get("/api/v1/holded/projects")

        assert str(holded_api.last_request.url) == PROJECTS_URL

    def test_remote_failure(self, client, holded_api, holded_api_key):
        holded_api.error = httpx.ReadTimeout("timed out")

        response = client.get("/api/v1/holded/projects")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch projects"}


class TestUpdateProjectTime:
    """POST /api/v1/holded/update_project_time"""

    def test_project_id_only_is_rejected(self, client, holded_api, holded_api_key):
        response = client.post("/api/v1/holded/update_project_time", json={"projectId": "p1"})

        assert response.status_code == 400
        assert response.json() == {"error": "timeTrackingId is required"}
        assert holded_api.requests == []

    def test_requires_project_id(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/update_project_time",
            json={"timeTrackingId": "t1", "duration": 60},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "projectId is required"}
        assert holded_api.requests == []

    def test_snake_case_ids_are_not_accepted(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/update_project_time",
            json={"project_id": "p9", "time_tracking_id": "t9", "desc": "d"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "projectId is required"}
        assert holded_api.requests == []

    def test_snake_case_keys_are_forwarded_as_fields(self, client, holded_api, holded_api_key):
        client.post(
            "/api/v1/holded/update_project_time",
            json={"projectId": "p1", "timeTrackingId": "t1", "project_id": "p9"},
        )

        assert str(holded_api.last_request.url) == f"{PROJECTS_URL}/p1/times/t1"
        assert holded_api.json_body() == {"project_id": "p9"}

    def test_array_body_counts_as_empty(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/update_project_time", json=[{"projectId": "p1"}]
        )

        assert response.status_code == 400
        assert response.json() == {"error": "projectId is required"}
        assert holded_api.requests == []

    def test_requires_an_updatable_field(self, client, holded_api, holded_api_key):
        response = client.post(
            "/api/v1/holded/update_project_time",
            json={"projectId": "p1", "timeTrackingId": "t1", "desc": "", "taskId": None},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Provide at least one field to update"}
        assert holded_api.requests == []

    def test_sends_non_empty_fields(self, client, holded_api, holded_api_key):
        holded_api.payload = {"status": 1, "info": "Updated"}

        response = client.post(
            "/api/v1/holded/update_project_time",
            json={
                "projectId": "p1",
                "timeTrackingId": "t1",
                "duration": 5400,
                "desc": "Sprint review",
                "billable": False,
                "start": "",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"status": 1, "info": "Updated"}
        request = holded_api.last_request
        assert request.method == "PUT"
        assert str(request.url) == f"{PROJECTS_URL}/p1/times/t1"
        assert holded_api.json_body() == {
            "duration": 5400,
            "desc": "Sprint review",
            "billable": False,
        }

    def test_remote_failure(self, client, holded_api, holded_api_key):
        holded_api.status_code = 422
        holded_api.payload = {"info": "invalid duration"}

        response = client.post(
            "/api/v1/holded/update_project_time",
            json={"projectId": "p1", "timeTrackingId": "t1", "duration": -1},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to update project time"}


class TestExtensionManifest:
    """GET /api/v1/holded/extension"""

    def test_lists_descriptors_without_tokens(self, client, holded_api):
        response = client.get("/api/v1/holded/extension")

        assert response.status_code == 200
        body = response.json()
        assert [a["url"] for a in body["actions"]] == [
            "/api/v1/holded/update_project_time",
            "/api/v1/holded/projects",
            "/api/v1/holded/register_time",
            "/api/v1/holded/employees",
            "/api/v1/holded/project_time_slots",
        ]
        assert all("token" not in a for a in body["actions"])
        assert len(body["cards"]) == 5
        assert holded_api.requests == []
