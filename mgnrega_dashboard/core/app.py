"""
FastAPI application factory for the worker dashboard.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..api.dashboard import add_dashboard_route
from ..api.routes import build_router

if TYPE_CHECKING:  # pragma: no cover
    from .dashboard import WorkerDashboard


def create_app(dashboard: "WorkerDashboard") -> FastAPI:
    """Create the FastAPI application bound to a dashboard instance."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: background load
        load_task = None
        if dashboard.config.load_on_startup:
            dashboard.log(f"📥 Loading workers from {dashboard.config.api_url}")
            load_task = asyncio.create_task(dashboard.controller.load())
        dashboard.load_task = load_task

        yield

        # Shutdown
        if load_task is not None and not load_task.done():
            load_task.cancel()
            try:
                await load_task
            except asyncio.CancelledError:
                pass
        await dashboard.aclose()

    app = FastAPI(
        title="MGNREGA Worker Dashboard",
        description="Dashboard for listing, adding and removing workers",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes and dashboard
    app.include_router(build_router(dashboard))
    add_dashboard_route(app, dashboard.config.api_url)

    return app
