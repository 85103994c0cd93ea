"""
MGNREGA Worker Dashboard
"""

from .core.dashboard import WorkerDashboard
from .core.controller import WorkerListController
from .core.store import WorkerStore
from .config import DashboardConfig
from .schema.models import ActionResult, DraftWorker, Worker

__version__ = "1.0.0"
__all__ = [
    "WorkerDashboard",
    "WorkerListController",
    "WorkerStore",
    "DashboardConfig",
    "ActionResult",
    "DraftWorker",
    "Worker",
]
