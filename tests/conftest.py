"""
Pytest configuration and fixtures for the worker dashboard tests.
"""

import json
from urllib.parse import unquote

import httpx
import pytest

from mgnrega_dashboard import DashboardConfig, WorkerDashboard, WorkerListController, WorkerStore

API_URL = "http://workers.test"


class FakeWorkerBackend:
    """In-memory stand-in for the remote /api/workers service."""

    def __init__(self, workers=None):
        self.workers = list(workers or [])
        self.requests = []
        self.next_id = 100
        self.fail_with = None  # status code, or "network" for a transport error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.fail_with == "network":
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "boom"})

        path = request.url.path
        if path == "/api/workers" and request.method == "GET":
            return httpx.Response(200, json=self.workers)

        if path == "/api/workers" and request.method == "POST":
            body = json.loads(request.content)
            record = {"_id": str(self.next_id), "name": body["name"], "village": body["village"]}
            self.next_id += 1
            self.workers.append(record)
            return httpx.Response(201, json=record)

        if path.startswith("/api/workers/") and request.method == "DELETE":
            worker_id = unquote(request.url.raw_path.decode("ascii").rsplit("/", 1)[-1])
            self.workers = [w for w in self.workers if w["_id"] != worker_id]
            return httpx.Response(200, json={"message": "Worker deleted"})

        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def sample_workers():
    return [
        {"_id": "1", "name": "Kumar", "village": "Alanganallur"},
        {"_id": "7", "name": "Lakshmi", "village": "Melur"},
    ]


@pytest.fixture
def backend(sample_workers):
    return FakeWorkerBackend(sample_workers)


@pytest.fixture
def store(backend):
    return WorkerStore(API_URL, client=backend.client())


@pytest.fixture
def notices():
    return []


@pytest.fixture
def controller(store, notices):
    return WorkerListController(store, notify=notices.append)


@pytest.fixture
def dashboard(backend):
    config = DashboardConfig(api_url=API_URL, load_on_startup=False)
    return WorkerDashboard(config, client=backend.client())
