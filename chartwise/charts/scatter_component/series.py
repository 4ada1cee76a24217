"""
Scatter series construction.

Rows are split into one series per color-channel key (or a single implicit
series when no color channel is bound). Every point keeps its channel values
as a tagged record; the positional ``value`` array the plotting surface
consumes is laid out as::

    [*aggregates, *infos, size_value, color_key?]

``ValueLayout`` owns the indices of that layout so the symbol-size function
and the tooltip never hard-code positions.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from chartwise.charts.shared.channels import ChannelBindings
from chartwise.charts.shared.formatters import get_label
from chartwise.charts.shared.projection import ProjectedRow
from chartwise.charts.shared.reference import get_reference
from chartwise.charts.shared.style_lookup import get_style
from chartwise.charts.shared.value_format import get_column_render_name, to_number
from chartwise.configs.logging_init import logger, settings
from chartwise.configs.settings_models import ScatterConfig
from chartwise.models.chart_config import ChartConfig, FieldBinding
from chartwise.models.render_spec import ScatterPoint, ScatterSeriesSpec
from chartwise.models.types import ChannelKind

NAME_SEPARATOR = "-"


# =============================================================================
# Size scale and value layout
# =============================================================================


@dataclass(frozen=True)
class SizeScale:
    """Shared (min, max) of the size channel across the whole dataset."""

    min: float
    max: float

    @property
    def is_flat(self) -> bool:
        return self.max == self.min

    @property
    def default_size_value(self) -> float:
        """Size used for rows whose size cell is absent or falsy."""
        return (self.max - self.min) / 2


def get_size_scale(
    rows: Sequence[Mapping[str, Any]],
    size_binding: FieldBinding | None,
    config: ScatterConfig | None = None,
) -> SizeScale:
    """Compute the global size scale over every row, not per series.

    Falls back to the configured default scale when no size channel is bound
    or no row carries a numeric size cell.
    """
    config = config or settings.scatter
    fallback = SizeScale(config.default_size_min, config.default_size_max)
    if size_binding is None or not rows:
        return fallback

    values = [to_number(row.get(size_binding.value_key)) for row in rows]
    numbers = [value for value in values if value is not None]
    if not numbers:
        logger.debug(f"No numeric values for size column '{size_binding.value_key}'")
        return fallback
    return SizeScale(min(numbers), max(numbers))


@dataclass(frozen=True)
class ValueLayout:
    """Index map of a point's positional ``value`` array."""

    aggregate_count: int
    info_count: int
    color_grouped: bool

    @property
    def size_index(self) -> int:
        return self.aggregate_count + self.info_count

    @property
    def color_index(self) -> int | None:
        return self.size_index + 1 if self.color_grouped else None

    def decode(self, value: Sequence[Any]) -> dict[str, Any]:
        """Split a positional value array back into its tagged fields."""

        def at(index: int | None) -> Any:
            if index is None or index >= len(value):
                return None
            return value[index]

        return {
            "aggregates": list(value[: self.aggregate_count]),
            "infos": list(value[self.aggregate_count : self.size_index]),
            "size_value": at(self.size_index),
            "color_key": at(self.color_index),
        }


class SymbolSizeFn:
    """Point radius as a function of the point's size value.

    The radius grows linearly with the size value, normalised against the
    shared scale and shaped by ``cycle_ratio``, then clamped to the configured
    pixel range. A flat scale (min == max) or a non-numeric size value yields
    a fixed radius.
    """

    __slots__ = ("layout", "scale", "cycle_ratio", "config")

    def __init__(
        self,
        layout: ValueLayout,
        scale: SizeScale,
        cycle_ratio: float = 1,
        config: ScatterConfig | None = None,
    ):
        self.layout = layout
        self.scale = scale
        self.cycle_ratio = cycle_ratio
        self.config = config or settings.scatter

    def _clamp(self, radius: float) -> float:
        return min(self.config.max_symbol_size, max(self.config.min_symbol_size, radius))

    @property
    def flat_radius(self) -> float:
        return self._clamp(self.config.base_pixel_size * self.cycle_ratio / 2)

    def radius(self, size_value: Any) -> float:
        number = to_number(size_value)
        if number is None or self.scale.is_flat:
            return self.flat_radius
        low = min(0.0, self.scale.min)
        ratio = (number - low) / (self.scale.max - low)
        return self._clamp(ratio * self.cycle_ratio * self.config.base_pixel_size)

    def __call__(self, value: Sequence[Any], params: Any = None) -> float:
        return self.radius(self.layout.decode(value)["size_value"])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolSizeFn):
            return NotImplemented
        return (self.layout, self.scale, self.cycle_ratio, self.config) == (
            other.layout,
            other.scale,
            other.cycle_ratio,
            other.config,
        )

    def __repr__(self) -> str:
        return f"SymbolSizeFn(size_index={self.layout.size_index}, scale={self.scale}, cycle_ratio={self.cycle_ratio})"


def get_cycle_ratio(config: ChartConfig) -> float:
    ratio = to_number(get_style(config.styles, ["scatter"], "cycleRatio"))
    # Non-positive ratios would collapse every point to the minimum radius
    return ratio if ratio is not None and ratio > 0 else 1.0


# =============================================================================
# Grouping and point construction
# =============================================================================


def _display(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class ColorGroup:
    key: str
    color: str | None
    rows: list[tuple[ProjectedRow, dict[str, Any]]]


def group_rows_by_color(
    rows: Sequence[tuple[ProjectedRow, dict[str, Any]]], color_binding: FieldBinding
) -> list[ColorGroup]:
    """Partition rows by the color binding's value, in first-appearance order.

    Each row lands in exactly one group. Keys compare by their string form,
    the same rule palette lookups use, so ``1`` and ``"1"`` share one series
    and series names stay unique. Keys missing from the binding's palette
    get no color so the plotting surface assigns one automatically.
    """
    palette = color_binding.color
    groups: dict[str, ColorGroup] = {}
    for row, payload in rows:
        key = _display(row.get(color_binding.value_key))
        group = groups.get(key)
        if group is None:
            color = palette.lookup(key) if palette is not None else None
            if color is None:
                logger.debug(f"No palette color for key {key!r}, using automatic color")
            group = groups[key] = ColorGroup(key=key, color=color, rows=[])
        group.rows.append((row, payload))
    return list(groups.values())


def build_point(
    row: ProjectedRow,
    payload: dict[str, Any],
    channels: ChannelBindings,
    scale: SizeScale,
    color_key: Any = None,
    color_grouped: bool = False,
) -> ScatterPoint:
    sizes = channels[ChannelKind.SIZE]
    size_value = row.get(sizes[0].value_key) if sizes else None
    # Absent or falsy size cells (None, 0, "") take the middle of the scale
    if not size_value:
        size_value = scale.default_size_value

    return ScatterPoint(
        name=NAME_SEPARATOR.join(
            _display(row.get(binding.value_key)) for binding in channels[ChannelKind.GROUP]
        ),
        aggregates=[row.get(binding.value_key) for binding in channels[ChannelKind.AGGREGATE]],
        infos=[row.get(binding.value_key) for binding in channels[ChannelKind.INFO]],
        size_value=size_value,
        color_key=color_key,
        color_grouped=color_grouped,
        payload=payload,
    )


def build_series(
    rows: Sequence[tuple[ProjectedRow, dict[str, Any]]],
    channels: ChannelBindings,
    config: ChartConfig,
    scale: SizeScale,
    reference: Mapping[str, Any],
    color_key: Any = None,
    color: str | None = None,
    color_grouped: bool = False,
) -> ScatterSeriesSpec:
    """Build one scatter series from its rows."""
    layout = ValueLayout(
        aggregate_count=len(channels[ChannelKind.AGGREGATE]),
        info_count=len(channels[ChannelKind.INFO]),
        color_grouped=color_grouped,
    )
    grouping_name = NAME_SEPARATOR.join(
        get_column_render_name(binding) for binding in channels[ChannelKind.GROUP]
    )
    data = [
        build_point(row, payload, channels, scale, color_key, color_grouped)
        for row, payload in rows
    ]
    label_style = get_label(config.styles)

    return ScatterSeriesSpec(
        name=_display(color_key) if color_grouped else grouping_name,
        data=data,
        symbol_size=SymbolSizeFn(layout, scale, get_cycle_ratio(config)),
        encode={"x": 0, "y": 1 if layout.aggregate_count > 1 else 0},
        item_style={"color": color} if color else None,
        label=label_style["label"],
        label_layout=label_style["labelLayout"],
        mark_line=reference.get("markLine"),
        mark_area=reference.get("markArea"),
    )


def build_scatter_series(
    rows: Sequence[tuple[ProjectedRow, dict[str, Any]]],
    channels: ChannelBindings,
    config: ChartConfig,
) -> list[ScatterSeriesSpec]:
    """Build every scatter series for one update.

    Args:
        rows: Projected rows paired with their auxiliary payloads.
        channels: Bindings per channel, see ``classify_bindings``.
        config: The chart configuration (styles and settings).

    Returns:
        One series per color key, or a single series when no color channel is
        bound. An empty dataset yields no series.
    """
    if not rows:
        return []

    projected = [row for row, _ in rows]
    sizes = channels[ChannelKind.SIZE]
    scale = get_size_scale(projected, sizes[0] if sizes else None)
    reference = get_reference(config.settings, projected, channels[ChannelKind.AGGREGATE])

    colors = channels[ChannelKind.COLOR]
    if not colors:
        return [build_series(rows, channels, config, scale, reference)]

    return [
        build_series(
            group.rows,
            channels,
            config,
            scale,
            reference,
            color_key=group.key,
            color=group.color,
            color_grouped=True,
        )
        for group in group_rows_by_color(rows, colors[0])
    ]
