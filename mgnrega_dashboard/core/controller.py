"""
Worker list controller: local view of the remote worker collection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..charts import DISTRICT_DATA, build_chart_data, build_chart_options, district_values
from ..errors import CreateFailed, DeleteFailed, LoadFailed, ValidationFailed
from ..schema.models import ActionResult, ChartData, DraftWorker, Worker
from .store import WorkerStore

logger = logging.getLogger("mgnrega_dashboard.controller")

VALIDATION_MESSAGE = "Please provide both name and village."
CREATE_FAILED_MESSAGE = "❌ Failed to add worker. Please try again."
DELETE_FAILED_MESSAGE = "❌ Failed to delete worker. Please try again."
LOADING_MESSAGE = "Loading workers..."
EMPTY_MESSAGE = "No workers found 😞"


@dataclass
class WorkerListState:
    """Everything the page displays."""

    district: str = "Madurai"
    workers: List[Worker] = field(default_factory=list)
    draft: DraftWorker = field(default_factory=DraftWorker)
    loading: bool = True


class WorkerListController:
    """Keeps the displayed worker list in step with the worker store.

    The collection is replaced by ``load``, appended to by ``add_worker`` and
    filtered by ``delete_worker``; nothing else touches it. Store failures are
    logged and returned as a failed ``ActionResult`` instead of raised, and
    the same user-facing message is passed to ``notify`` when one is set.

    Operations may overlap. Each one applies its response to the collection
    as it is when the response arrives, so the last response wins.
    """

    def __init__(
        self,
        store: WorkerStore,
        district: str = "Madurai",
        notify: Optional[Callable[[str], None]] = None,
    ):
        district_values(district)
        self.store = store
        self.state = WorkerListState(district=district)
        self.notify = notify

    @property
    def workers(self) -> List[Worker]:
        return self.state.workers

    @property
    def draft(self) -> DraftWorker:
        return self.state.draft

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def district(self) -> str:
        return self.state.district

    # ---------- Store operations ----------
    async def load(self) -> ActionResult:
        """Fetch the full collection and replace the local one."""
        try:
            workers = await self.store.list_workers()
        except LoadFailed as e:
            logger.error("Error fetching workers: %s", e, exc_info=True)
            return ActionResult(ok=False, error=e.code)
        else:
            self.state.workers = _dedupe(workers)
            logger.info("📋 Loaded %d workers", len(self.state.workers))
            return ActionResult(ok=True)
        finally:
            self.state.loading = False

    async def add_worker(
        self, name: Optional[str] = None, village: Optional[str] = None
    ) -> ActionResult:
        """Submit the draft, after overwriting it with any values given."""
        self.update_draft(name=name, village=village)
        draft = self.state.draft

        if not draft.is_complete():
            return self._fail(ValidationFailed(VALIDATION_MESSAGE), VALIDATION_MESSAGE)

        try:
            worker = await self.store.create_worker(draft.name, draft.village)
        except CreateFailed as e:
            logger.error("Error adding worker: %s", e, exc_info=True)
            return self._fail(e, CREATE_FAILED_MESSAGE)

        if any(w.id == worker.id for w in self.state.workers):
            logger.warning("Store returned existing worker id %s, not adding it again", worker.id)
        else:
            self.state.workers = self.state.workers + [worker]
        draft.clear()
        logger.info("✅ Added worker %s (%s, %s)", worker.id, worker.name, worker.village)
        return ActionResult(ok=True, worker=worker)

    async def delete_worker(self, worker_id: str) -> ActionResult:
        """Delete a worker in the store, then drop it locally."""
        try:
            await self.store.delete_worker(worker_id)
        except DeleteFailed as e:
            logger.error("Error deleting worker %s: %s", worker_id, e, exc_info=True)
            return self._fail(e, DELETE_FAILED_MESSAGE)

        self.state.workers = [w for w in self.state.workers if w.id != worker_id]
        logger.info("🗑️ Deleted worker %s", worker_id)
        return ActionResult(ok=True)

    def _fail(self, error: Exception, message: str) -> ActionResult:
        if self.notify is not None:
            self.notify(message)
        return ActionResult(ok=False, error=getattr(error, "code", type(error).__name__), message=message)

    # ---------- Local state ----------
    def update_draft(self, name: Optional[str] = None, village: Optional[str] = None) -> DraftWorker:
        if name is not None:
            self.state.draft.name = name
        if village is not None:
            self.state.draft.village = village
        return self.state.draft

    def select_district(self, district: str) -> str:
        district_values(district)
        self.state.district = district
        return district

    def chart(self) -> ChartData:
        return build_chart_data(self.state.district)

    def chart_options(self) -> Dict[str, Any]:
        return build_chart_options(self.state.district)

    def status_message(self) -> Optional[str]:
        if self.state.loading:
            return LOADING_MESSAGE
        if not self.state.workers:
            return EMPTY_MESSAGE
        return None

    def serialize_state(self) -> Dict[str, Any]:
        return {
            "workers": [w.model_dump(by_alias=True) for w in self.state.workers],
            "draft": self.state.draft.model_dump(),
            "loading": self.state.loading,
            "status_message": self.status_message(),
            "district": self.state.district,
            "districts": list(DISTRICT_DATA),
        }


def _dedupe(workers: List[Worker]) -> List[Worker]:
    seen = set()
    unique = []
    for worker in workers:
        if worker.id in seen:
            logger.warning("Duplicate worker id %s in store listing, keeping the first", worker.id)
            continue
        seen.add(worker.id)
        unique.append(worker)
    return unique
