"""
HTTP client for the remote worker store.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Type
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..errors import CreateFailed, DeleteFailed, LoadFailed, WorkerStoreError
from ..schema.models import NewWorker, Worker

logger = logging.getLogger("mgnrega_dashboard.store")

WORKERS_PATH = "/api/workers"


class WorkerStore:
    """Async client for the ``/api/workers`` endpoints of the backend.

    Every failure (transport error, non-2xx status, or a body that does not
    decode to worker records) is raised as the ``WorkerStoreError`` subclass
    matching the operation. Requests are never retried and have no timeout.
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=None)

    async def __aenter__(self) -> "WorkerStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _request(
        self, error_cls: Type[WorkerStoreError], method: str, path: str, **kwargs
    ) -> httpx.Response:
        try:
            response = await self.client.request(method, self._url(path), **kwargs)
        except httpx.HTTPError as e:
            raise error_cls(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise error_cls(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    async def list_workers(self) -> List[Worker]:
        """GET /api/workers"""
        response = await self._request(LoadFailed, "GET", WORKERS_PATH)
        try:
            payload = response.json()
            if not isinstance(payload, list):
                raise LoadFailed(
                    f"expected a JSON array of workers, got {type(payload).__name__}",
                    status_code=response.status_code,
                )
            workers = [Worker.model_validate(item) for item in payload]
        except (ValueError, ValidationError) as e:
            raise LoadFailed(
                f"invalid worker list: {e}", status_code=response.status_code
            ) from e

        logger.debug("Fetched %d workers", len(workers))
        return workers

    async def create_worker(self, name: str, village: str) -> Worker:
        """POST /api/workers"""
        body = NewWorker(name=name, village=village)
        response = await self._request(
            CreateFailed, "POST", WORKERS_PATH, json=body.model_dump()
        )
        try:
            worker = Worker.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CreateFailed(
                f"invalid worker record: {e}", status_code=response.status_code
            ) from e

        logger.debug("Created worker %s", worker.id)
        return worker

    async def delete_worker(self, worker_id: str) -> None:
        """DELETE /api/workers/{id}"""
        # Ids are opaque, so escape every reserved character
        path = f"{WORKERS_PATH}/{quote(worker_id, safe='')}"
        await self._request(DeleteFailed, "DELETE", path)
        logger.debug("Deleted worker %s", worker_id)
