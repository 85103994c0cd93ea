"""
Static district performance table and the bar chart built from it.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .errors import UnknownDistrict
from .schema.models import ChartData, ChartDataset

LABELS: Tuple[str, ...] = (
    "Work Completed",
    "Funds Used",
    "Active Workers",
    "Ongoing Works",
    "New Projects",
)

BAR_COLORS: Tuple[str, ...] = ("#4CAF50", "#2196F3", "#FFC107", "#FF5722", "#9C27B0")

BAR_BORDER_RADIUS = 10

# One value per entry in LABELS.
DISTRICT_DATA: Mapping[str, Tuple[int, ...]] = MappingProxyType(
    {
        "Madurai": (65, 78, 90, 80, 85),
        "Salem": (55, 68, 72, 69, 80),
        "Theni": (45, 60, 58, 62, 70),
        "Dindigul": (70, 82, 88, 79, 91),
    }
)


def district_values(district: str) -> Tuple[int, ...]:
    try:
        return DISTRICT_DATA[district]
    except KeyError:
        raise UnknownDistrict(district) from None


def build_chart_data(district: str) -> ChartData:
    """Chart data for one district's row of the table."""
    values = district_values(district)
    return ChartData(
        labels=list(LABELS),
        datasets=[
            ChartDataset(
                label=f"{district} Performance",
                data=list(values),
                background_color=list(BAR_COLORS),
                border_radius=BAR_BORDER_RADIUS,
            )
        ],
    )


def build_chart_options(district: str) -> Dict[str, Any]:
    district_values(district)
    return {
        "responsive": True,
        "plugins": {
            "legend": {"position": "top"},
            "title": {
                "display": True,
                "text": f"{district} District Progress",
                "font": {"size": 18},
            },
        },
    }
