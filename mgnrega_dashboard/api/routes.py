"""
API and WebSocket routes for the worker dashboard.
"""

import asyncio
import json
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse

from ..errors import UnknownDistrict, ValidationFailed
from ..schema.models import ActionResult, DistrictSelection, DraftWorker, NewWorker

if TYPE_CHECKING:  # pragma: no cover
    from ..core.dashboard import WorkerDashboard


def _failure_response(result: ActionResult) -> JSONResponse:
    # Validation is the caller's fault; everything else is the upstream store's
    status_code = 400 if result.error == ValidationFailed.code else 502
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": result.error, "message": result.message}},
    )


def build_router(dashboard: "WorkerDashboard") -> APIRouter:
    """Build the API router bound to a dashboard instance."""

    router = APIRouter()
    controller = dashboard.controller

    @router.get("/")
    async def root():
        return dashboard.serialize_status()

    @router.get("/api/state")
    async def get_state():
        return controller.serialize_state()

    @router.post("/api/workers")
    async def add_worker(worker: NewWorker):
        result = await controller.add_worker(worker.name, worker.village)
        if not result.ok:
            return _failure_response(result)
        return {"worker": result.worker.model_dump(by_alias=True)}

    @router.delete("/api/workers/{worker_id}")
    async def delete_worker(worker_id: str):
        result = await controller.delete_worker(worker_id)
        if not result.ok:
            return _failure_response(result)
        return {"deleted": worker_id}

    @router.put("/api/draft")
    async def update_draft(draft: DraftWorker):
        return controller.update_draft(draft.name, draft.village).model_dump()

    @router.post("/api/district")
    async def select_district(selection: DistrictSelection):
        try:
            controller.select_district(selection.district)
        except UnknownDistrict as e:
            raise HTTPException(status_code=404, detail=str(e))
        return {"district": controller.district}

    @router.get("/api/chart")
    async def get_chart():
        return {
            "data": controller.chart().model_dump(by_alias=True),
            "options": controller.chart_options(),
        }

    @router.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        await websocket.accept()
        try:
            while True:
                await websocket.send_text(json.dumps(dashboard.serialize_ws_status()))
                await asyncio.sleep(dashboard.websocket_update_interval)
        except WebSocketDisconnect:
            dashboard.log("Status WebSocket disconnected")

    return router
