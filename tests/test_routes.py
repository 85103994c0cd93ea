"""
Tests for the dashboard HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from mgnrega_dashboard import DashboardConfig, WorkerDashboard
from mgnrega_dashboard.core.controller import CREATE_FAILED_MESSAGE, DELETE_FAILED_MESSAGE, VALIDATION_MESSAGE

from conftest import API_URL


async def _wait(task):
    await task


@pytest.fixture
def client(dashboard):
    """Test client with the worker list already loaded."""
    with TestClient(dashboard.app) as test_client:
        test_client.portal.call(dashboard.controller.load)
        yield test_client


class TestStatus:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["api_url"] == API_URL
        assert data["workers"] == 2
        assert data["loading"] is False

    def test_dashboard_page(self, client):
        response = client.get("/dashboard")
        assert response.status_code == 200
        assert "MGNREGA Worker Dashboard" in response.text
        assert API_URL in response.text

    def test_dashboard_page_builds_rows_without_markup_strings(self, client):
        page = client.get("/dashboard").text
        assert "innerHTML" not in page
        assert "data-id=" not in page
        assert "button.dataset.id = worker._id" in page
        assert "td.textContent = text" in page

    def test_state(self, client):
        data = client.get("/api/state").json()
        assert [w["_id"] for w in data["workers"]] == ["1", "7"]
        assert data["status_message"] is None
        assert data["district"] == "Madurai"


class TestWorkersAPI:
    def test_add_worker(self, client, backend):
        response = client.post("/api/workers", json={"name": "Devi", "village": "Usilampatti"})
        assert response.status_code == 200
        assert response.json()["worker"] == {"_id": "100", "name": "Devi", "village": "Usilampatti"}

        state = client.get("/api/state").json()
        assert state["workers"][-1]["name"] == "Devi"
        assert state["draft"] == {"name": "", "village": ""}

    def test_add_worker_blank_is_rejected_locally(self, client, backend):
        requests_before = len(backend.requests)

        response = client.post("/api/workers", json={"name": "  ", "village": "Melur"})

        assert response.status_code == 400
        assert response.json()["error"] == {"code": "ValidationFailed", "message": VALIDATION_MESSAGE}
        assert len(backend.requests) == requests_before

    def test_add_worker_missing_fields(self, client):
        response = client.post("/api/workers", json={})
        assert response.status_code == 422

    def test_add_worker_store_failure(self, client, backend, dashboard):
        backend.fail_with = 500

        response = client.post("/api/workers", json={"name": "Devi", "village": "Usilampatti"})

        assert response.status_code == 502
        assert response.json()["error"] == {"code": "CreateFailed", "message": CREATE_FAILED_MESSAGE}
        assert dashboard.last_notice == CREATE_FAILED_MESSAGE
        assert len(client.get("/api/state").json()["workers"]) == 2

    def test_delete_worker(self, client):
        response = client.delete("/api/workers/1")
        assert response.status_code == 200
        assert response.json() == {"deleted": "1"}

        state = client.get("/api/state").json()
        assert [w["_id"] for w in state["workers"]] == ["7"]

    def test_delete_worker_with_encoded_id(self, client, backend, dashboard):
        backend.workers = [
            {"_id": "a", "name": "Kumar", "village": "Alanganallur"},
            {"_id": "a?b", "name": "Devi", "village": "Usilampatti"},
        ]
        client.portal.call(dashboard.controller.load)

        response = client.delete("/api/workers/a%3Fb")

        assert response.status_code == 200
        assert response.json() == {"deleted": "a?b"}
        assert backend.requests[-1].url.raw_path == b"/api/workers/a%3Fb"
        assert [w["_id"] for w in backend.workers] == ["a"]
        assert [w["_id"] for w in client.get("/api/state").json()["workers"]] == ["a"]

    def test_delete_worker_store_failure(self, client, backend):
        backend.fail_with = "network"

        response = client.delete("/api/workers/1")

        assert response.status_code == 502
        assert response.json()["error"]["message"] == DELETE_FAILED_MESSAGE
        assert len(client.get("/api/state").json()["workers"]) == 2

    def test_update_draft(self, client):
        response = client.put("/api/draft", json={"name": "Devi", "village": ""})
        assert response.json() == {"name": "Devi", "village": ""}
        assert client.get("/api/state").json()["draft"]["name"] == "Devi"


class TestChartAPI:
    def test_chart_for_default_district(self, client):
        data = client.get("/api/chart").json()
        assert data["data"]["datasets"][0]["label"] == "Madurai Performance"
        assert data["data"]["datasets"][0]["data"] == [65, 78, 90, 80, 85]
        assert data["options"]["plugins"]["title"]["text"] == "Madurai District Progress"

    def test_select_district(self, client):
        workers_before = client.get("/api/state").json()["workers"]

        response = client.post("/api/district", json={"district": "Salem"})

        assert response.status_code == 200
        assert response.json() == {"district": "Salem"}
        assert client.get("/api/chart").json()["data"]["datasets"][0]["data"] == [55, 68, 72, 69, 80]
        assert client.get("/api/state").json()["workers"] == workers_before

    def test_select_unknown_district(self, client):
        response = client.post("/api/district", json={"district": "Chennai"})
        assert response.status_code == 404
        assert client.get("/api/state").json()["district"] == "Madurai"


def test_startup_loads_workers(backend):
    config = DashboardConfig(api_url=API_URL)
    dashboard = WorkerDashboard(config, client=backend.client())

    with TestClient(dashboard.app) as client:
        assert dashboard.load_task is not None
        client.portal.call(_wait, dashboard.load_task)

        data = client.get("/api/state").json()
        assert data["loading"] is False
        assert [w["_id"] for w in data["workers"]] == ["1", "7"]


def test_startup_load_failure_shows_empty_state(backend):
    backend.fail_with = 502
    dashboard = WorkerDashboard(DashboardConfig(api_url=API_URL), client=backend.client())

    with TestClient(dashboard.app) as client:
        client.portal.call(_wait, dashboard.load_task)

        data = client.get("/api/state").json()
        assert data["workers"] == []
        assert data["status_message"] == "No workers found 😞"


def test_ws_status_snapshot(dashboard):
    status = dashboard.serialize_ws_status()
    assert status["loading"] is True
    assert "timestamp" in status
