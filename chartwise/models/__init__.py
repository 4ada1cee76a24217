"""
Chart Models.

Typed Pydantic models for chart inputs (dataset, configuration) and the
render spec handed to the plotting surface.

Usage:
    from chartwise.models import (
        ChartDataset,
        ChartConfig,
        FieldBinding,
        RenderOptions,
    )
"""

from chartwise.models.chart_config import (
    ChartConfig,
    ChartRequirement,
    ColorPalette,
    DataSection,
    FieldBinding,
    FieldFormat,
    ReferenceArea,
    ReferenceLine,
)
from chartwise.models.dataset import ChartDataset, DatasetColumn
from chartwise.models.render_spec import (
    AxisSpec,
    GridSpec,
    LegendSpec,
    RenderOptions,
    ScatterPoint,
    ScatterSeriesSpec,
    TooltipSpec,
)
from chartwise.models.types import AggregateKind, ChannelKind, FormatKind, ReferenceValueKind

__all__ = [
    # Types
    "AggregateKind",
    "ChannelKind",
    "FormatKind",
    "ReferenceValueKind",
    # Inputs
    "ChartDataset",
    "DatasetColumn",
    "ChartConfig",
    "ChartRequirement",
    "ColorPalette",
    "DataSection",
    "FieldBinding",
    "FieldFormat",
    "ReferenceArea",
    "ReferenceLine",
    # Render spec
    "AxisSpec",
    "GridSpec",
    "LegendSpec",
    "RenderOptions",
    "ScatterPoint",
    "ScatterSeriesSpec",
    "TooltipSpec",
]
