"""
Chart Type Definitions.

Enums and literal types shared by chart configuration and render spec models.
"""

from enum import Enum
from typing import Literal


class ChannelKind(str, Enum):
    """Semantic role a bound field plays in a chart."""

    GROUP = "group"  # Dimensions, joined into point names
    AGGREGATE = "aggregate"  # Measures, plotted on the value axes
    SIZE = "size"  # Drives the point radius
    COLOR = "color"  # Splits rows into series
    INFO = "info"  # Carried into the tooltip only


class AggregateKind(str, Enum):
    """Aggregation applied to a measure column by the query layer."""

    SUM = "SUM"
    AVG = "AVG"
    COUNT = "COUNT"
    COUNT_DISTINCT = "COUNT_DISTINCT"
    MAX = "MAX"
    MIN = "MIN"
    NONE = "NONE"


class FormatKind(str, Enum):
    """Number formats available for bound fields."""

    DEFAULT = "default"
    NUMERIC = "numeric"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    SCIENTIFIC = "scientificNotation"


class ReferenceValueKind(str, Enum):
    """How a reference mark derives its position."""

    CONSTANT = "constant"
    AVERAGE = "average"
    MAX = "max"
    MIN = "min"


# Legend placement presets
LegendPosition = Literal["top", "bottom", "left", "right"]

LegendOrient = Literal["horizontal", "vertical"]

# Axis keys in the render spec
AxisKey = Literal["xAxis", "yAxis"]
