"""
Error types raised by the worker store and reported by the controller.
"""

from typing import Optional


class DashboardError(Exception):
    """Base class for dashboard errors."""

    code = "DashboardError"


class WorkerStoreError(DashboardError):
    """A request to the remote worker store did not succeed."""

    code = "WorkerStoreError"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LoadFailed(WorkerStoreError):
    code = "LoadFailed"


class CreateFailed(WorkerStoreError):
    code = "CreateFailed"


class ValidationFailed(CreateFailed):
    """Draft rejected locally; no request was made."""

    code = "ValidationFailed"


class DeleteFailed(WorkerStoreError):
    code = "DeleteFailed"


class UnknownDistrict(DashboardError, KeyError):
    code = "UnknownDistrict"

    def __init__(self, district: str):
        super().__init__(district)
        self.district = district

    def __str__(self) -> str:
        return f"Unknown district: {self.district}"
