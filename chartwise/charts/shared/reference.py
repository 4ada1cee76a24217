"""
Reference lines and areas drawn along an axis metric.

Reference marks live in the chart ``settings`` tree under the ``reference``
group (``lines`` and ``areas``). A mark follows one aggregate binding by uid;
it is placed on ``xAxis`` when that binding drives the first value axis and
on ``yAxis`` when it drives the second.
"""

from collections.abc import Mapping, Sequence
from statistics import fmean
from typing import Any

from pydantic import ValidationError

from chartwise.charts.shared.style_lookup import get_style
from chartwise.charts.shared.value_format import to_number
from chartwise.configs.logging_init import logger
from chartwise.models.chart_config import (
    FieldBinding,
    ReferenceArea,
    ReferenceBound,
    ReferenceLine,
    StyleTree,
)
from chartwise.models.render_spec import compact
from chartwise.models.types import AxisKey, ReferenceValueKind


def _parse_marks(raw: Any, model: type[ReferenceLine] | type[ReferenceArea]) -> list:
    marks = []
    for entry in raw or []:
        try:
            marks.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping invalid {model.__name__}: {e.error_count()} error(s)")
    return marks


def _metric_values(rows: Sequence[Mapping[str, Any]], binding: FieldBinding) -> list[float]:
    values = (to_number(row.get(binding.value_key)) for row in rows)
    return [value for value in values if value is not None]


def _reference_value(bound: ReferenceBound, values: Sequence[float]) -> float | None:
    if bound.value_type == ReferenceValueKind.CONSTANT:
        return bound.constant_value
    if not values:
        return None
    if bound.value_type == ReferenceValueKind.AVERAGE:
        return fmean(values)
    if bound.value_type == ReferenceValueKind.MAX:
        return max(values)
    return min(values)


def _mark_label(
    show: bool | None, position: str | None, font: Mapping[str, Any] | None
) -> dict[str, Any] | None:
    return compact({"show": show, "position": position, **(font or {})}) or None


def _axis_lookup(axis_bindings: Sequence[FieldBinding]) -> dict[str, tuple[AxisKey, FieldBinding]]:
    axis_keys: tuple[AxisKey, AxisKey] = ("xAxis", "yAxis")
    return {
        binding.uid: (axis_key, binding)
        for axis_key, binding in zip(axis_keys, axis_bindings)
        if binding.uid
    }


def get_mark_line(
    lines: Sequence[ReferenceLine],
    rows: Sequence[Mapping[str, Any]],
    axis_bindings: Sequence[FieldBinding],
) -> dict[str, Any] | None:
    lookup = _axis_lookup(axis_bindings)
    data = []
    for line in lines:
        if not line.enabled or line.metric not in lookup:
            continue
        axis_key, binding = lookup[line.metric]
        value = _reference_value(line, _metric_values(rows, binding))
        if value is None:
            continue
        data.append(
            compact(
                {
                    axis_key: value,
                    "name": line.label,
                    "label": _mark_label(line.show_label, line.position, line.font),
                    "lineStyle": line.line_style,
                }
            )
        )
    return {"data": data} if data else None


def get_mark_area(
    areas: Sequence[ReferenceArea],
    rows: Sequence[Mapping[str, Any]],
    axis_bindings: Sequence[FieldBinding],
) -> dict[str, Any] | None:
    lookup = _axis_lookup(axis_bindings)
    data = []
    for area in areas:
        if not area.enabled or area.metric not in lookup:
            continue
        axis_key, binding = lookup[area.metric]
        values = _metric_values(rows, binding)
        start = _reference_value(area.start, values)
        end = _reference_value(area.end, values)
        if start is None or end is None:
            continue
        data.append(
            [
                compact(
                    {
                        axis_key: start,
                        "name": area.label,
                        "label": _mark_label(area.show_label, area.position, area.font),
                        "itemStyle": area.area_style,
                    }
                ),
                {axis_key: end},
            ]
        )
    return {"data": data} if data else None


def get_reference(
    settings: StyleTree,
    rows: Sequence[Mapping[str, Any]],
    axis_bindings: Sequence[FieldBinding],
) -> dict[str, dict[str, Any] | None]:
    """Resolve reference marks for a series.

    Args:
        settings: The chart settings tree.
        rows: Projected rows of the whole dataset (statistics are global).
        axis_bindings: Aggregate bindings in axis order (x first, then y).

    Returns:
        ``{"markLine": ..., "markArea": ...}``; entries are None when no mark applies.
    """
    lines = _parse_marks(get_style(settings, ["reference"], "lines"), ReferenceLine)
    areas = _parse_marks(get_style(settings, ["reference"], "areas"), ReferenceArea)
    return {
        "markLine": get_mark_line(lines, rows, axis_bindings),
        "markArea": get_mark_area(areas, rows, axis_bindings),
    }
