"""
Worker dashboard service.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, Optional

import httpx

from ..config import DashboardConfig
from .app import create_app
from .controller import WorkerListController
from .store import WorkerStore

logger = logging.getLogger("mgnrega_dashboard")


class WorkerDashboard:
    """FastAPI dashboard over a remote worker store."""

    websocket_update_interval: int = 5

    def __init__(self, config: DashboardConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.store = WorkerStore(config.api_url, client=client)
        self.controller = WorkerListController(
            self.store, district=config.default_district, notify=self._on_notice
        )
        self.started_at = datetime.now()
        self.last_notice: Optional[str] = None
        self.load_task: Optional[asyncio.Task] = None

        # Build FastAPI application with routes and dashboard
        self.app = create_app(self)

    # ---------- Public serialization helpers ----------
    def serialize_status(self) -> Dict[str, Any]:
        return {
            "service": "mgnrega-dashboard",
            "api_url": self.config.api_url,
            "loading": self.controller.loading,
            "workers": len(self.controller.workers),
            "district": self.controller.district,
            "uptime": (datetime.now() - self.started_at).total_seconds(),
            "config": self.config.model_dump(),
        }

    def serialize_ws_status(self) -> Dict[str, Any]:
        status = self.controller.serialize_state()
        status["timestamp"] = datetime.now().isoformat()
        return status

    # ---------- Logging helper ----------
    def log(self, message: str) -> None:
        logger.info(message)

    def _on_notice(self, message: str) -> None:
        self.last_notice = message
        logger.warning("User notified: %s", message)

    # ---------- Lifecycle ----------
    async def aclose(self) -> None:
        await self.store.aclose()

    def run(self):
        """Run the dashboard with uvicorn"""
        import uvicorn

        self.log("🚀 Starting Worker Dashboard")
        self.log("=" * 60)
        self.log(f"🔌 Worker API:    {self.config.api_url}")
        self.log(f"🌐 Web Interface: http://{self.config.api_host}:{self.config.api_port}/dashboard")
        self.log(f"📊 API Docs:      http://{self.config.api_host}:{self.config.api_port}/docs")
        self.log("=" * 60)

        try:
            uvicorn.run(
                self.app,
                host=self.config.api_host,
                port=self.config.api_port,
                log_level=self.config.log_level,
                loop="asyncio",
            )
        except KeyboardInterrupt:
            self.log("🛑 Server stopped by user")
