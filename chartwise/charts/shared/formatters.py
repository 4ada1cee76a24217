"""
Style formatters: turn style lookups into axis, legend, label and grid specs.

All functions are pure. Unset style values stay ``None`` and are dropped
when the render spec is exported.
"""

from collections.abc import Sequence
from typing import Any

from chartwise.charts.shared.style_lookup import get_styles
from chartwise.charts.shared.value_format import get_column_render_name
from chartwise.models.chart_config import FieldBinding, StyleTree
from chartwise.models.render_spec import AxisSpec, GridSpec, LegendSpec, compact
from chartwise.models.types import AxisKey, LegendOrient, LegendPosition

AXIS_STYLE_KEYS = (
    "showAxis",
    "inverseAxis",
    "lineStyle",
    "showLabel",
    "font",
    "unitFont",
    "showTitleAndUnit",
    "nameLocation",
    "nameGap",
    "nameRotate",
    "min",
    "max",
)

# The shared splitLine group names its toggles after the line direction
SPLIT_LINE_KEYS: dict[AxisKey, tuple[str, str]] = {
    "xAxis": ("showHorizonLine", "horizonLineStyle"),
    "yAxis": ("showVerticalLine", "verticalLineStyle"),
}

# position -> (orient, layout rectangle); "right" is the fallback
LEGEND_PRESETS: dict[LegendPosition, tuple[LegendOrient, dict[str, int]]] = {
    "top": ("horizontal", {"top": 8, "left": 8, "right": 8, "height": 32}),
    "bottom": ("horizontal", {"bottom": 8, "left": 8, "right": 8, "height": 32}),
    "left": ("vertical", {"left": 8, "top": 16, "bottom": 24, "width": 96}),
    "right": ("vertical", {"right": 8, "top": 16, "bottom": 24, "width": 96}),
}


def get_axis(styles: StyleTree, binding: FieldBinding | None, axis_key: AxisKey) -> AxisSpec:
    """Build one value axis from its style group plus the shared split line group."""
    (
        show_axis,
        inverse,
        line_style,
        show_label,
        font,
        unit_font,
        show_title_and_unit,
        name_location,
        name_gap,
        name_rotate,
        axis_min,
        axis_max,
    ) = get_styles(styles, [axis_key], AXIS_STYLE_KEYS)
    name = get_column_render_name(binding) if show_title_and_unit and binding else None
    show_split_line, split_line_style = get_styles(
        styles, ["splitLine"], SPLIT_LINE_KEYS[axis_key]
    )

    return AxisSpec(
        type="value",
        inverse=inverse,
        name=name,
        name_location=name_location,
        name_gap=name_gap,
        name_rotate=name_rotate,
        min=axis_min,
        max=axis_max,
        axis_label=compact({"show": show_label, **(font or {})}),
        axis_line=compact({"show": show_axis, "lineStyle": line_style}),
        axis_tick=compact({"show": show_label, "lineStyle": line_style}),
        name_text_style=unit_font,
        split_line=compact({"show": show_split_line, "lineStyle": split_line_style}),
    )


def get_legend(styles: StyleTree, series_names: Sequence[str]) -> LegendSpec:
    show, legend_type, font, position, select_all = get_styles(
        styles, ["legend"], ["showLegend", "type", "font", "position", "selectAll"]
    )
    if not isinstance(position, str) or position not in LEGEND_PRESETS:
        position = "right"
    orient, rectangle = LEGEND_PRESETS[position]
    selected = {name: bool(select_all) for name in series_names}

    return LegendSpec(
        show=show,
        type=legend_type,
        orient=orient,
        selected=selected,
        data=list(series_names),
        text_style=font,
        **rectangle,
    )


def get_label(styles: StyleTree) -> dict[str, Any]:
    """Point label style; the label text is always the point name."""
    show, position, font = get_styles(styles, ["label"], ["showLabel", "position", "font"])
    return {
        "label": compact({"show": show, "position": position, **(font or {}), "formatter": "{b}"}),
        "labelLayout": {"hideOverlap": True},
    }


def get_grid(styles: StyleTree) -> GridSpec:
    contain_label, left, right, bottom, top = get_styles(
        styles,
        ["margin"],
        ["containLabel", "marginLeft", "marginRight", "marginBottom", "marginTop"],
    )
    return GridSpec(left=left, right=right, bottom=bottom, top=top, contain_label=contain_label)
