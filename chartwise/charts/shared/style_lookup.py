"""
Style lookups against a chart's style tree.

Style values are addressed by a group path (``("legend",)``,
``("xAxis", "splitLine")``) and a key inside that group. A missing group or
key never raises: it resolves to ``None``, which downstream formatters treat
as "let the plotting library decide".
"""

from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from chartwise.models.chart_config import StyleTree

# Keys the engine substitutes a default for when the user left them unset.
# Everything else stays unset and is omitted from the render spec.
STYLE_DEFAULTS: dict[tuple[tuple[str, ...], str], Any] = {
    (("scatter",), "cycleRatio"): 1,
    (("legend",), "selectAll"): True,
    (("legend",), "position"): "right",
}


class StyleValue(NamedTuple):
    """Resolution result of one style key."""

    value: Any
    is_set: bool

    def or_default(self, default: Any) -> Any:
        return self.value if self.is_set else default


def find_style_group(tree: StyleTree, path: Sequence[str]) -> Mapping[str, Any] | None:
    """Walk ``path`` through nested groups; None when any segment is missing."""
    group: Any = tree
    for segment in path:
        if not isinstance(group, Mapping):
            return None
        group = group.get(segment)
    return group if isinstance(group, Mapping) else None


def resolve_style(tree: StyleTree, path: Sequence[str], key: str) -> StyleValue:
    group = find_style_group(tree, path)
    if group is None or key not in group or group[key] is None:
        return StyleValue(None, False)
    return StyleValue(group[key], True)


def get_style(tree: StyleTree, path: Sequence[str], key: str) -> Any:
    """Resolve one key, substituting the documented default where one exists."""
    default = STYLE_DEFAULTS.get((tuple(path), key))
    return resolve_style(tree, path, key).or_default(default)


def get_styles(tree: StyleTree, path: Sequence[str], keys: Sequence[str]) -> tuple[Any, ...]:
    """Resolve several keys of one group, positionally aligned with ``keys``.

    Example:
        >>> get_styles({"legend": {"showLegend": True}}, ["legend"], ["showLegend", "type"])
        (True, None)
    """
    return tuple(get_style(tree, path, key) for key in keys)
