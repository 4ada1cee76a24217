from chartwise.charts.scatter_component.chart import (
    SCATTER_REQUIREMENTS,
    ChartState,
    ChartUpdateProps,
    ScatterChart,
)
from chartwise.charts.scatter_component.options import build_scatter_options

__all__ = [
    "SCATTER_REQUIREMENTS",
    "ChartState",
    "ChartUpdateProps",
    "ScatterChart",
    "build_scatter_options",
]
