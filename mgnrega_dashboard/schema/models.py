"""
Data models used by the worker dashboard service.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Worker(BaseModel):
    """A worker record as held by the remote store."""

    id: str = Field(alias="_id")
    name: str
    village: str

    model_config = ConfigDict(populate_by_name=True)


class NewWorker(BaseModel):
    """Body of a create request."""

    name: str
    village: str


class DraftWorker(BaseModel):
    """Pending input from the add form."""

    name: str = ""
    village: str = ""

    def is_complete(self) -> bool:
        return bool(self.name.strip()) and bool(self.village.strip())

    def clear(self) -> None:
        self.name = ""
        self.village = ""


class ActionResult(BaseModel):
    """Outcome of a controller operation."""

    ok: bool
    error: Optional[str] = None
    message: Optional[str] = None
    worker: Optional[Worker] = None


class DistrictSelection(BaseModel):
    district: str


class ChartDataset(BaseModel):
    label: str
    data: List[int]
    background_color: List[str] = Field(alias="backgroundColor")
    border_radius: int = Field(10, alias="borderRadius")

    model_config = ConfigDict(populate_by_name=True)


class ChartData(BaseModel):
    """Bar chart config in the shape Chart.js consumes."""

    labels: List[str]
    datasets: List[ChartDataset]
