"""
Scatter tooltip formatter.

The plotting surface calls the formatter on every hover with the hovered
point parameters (a list for axis-triggered tooltips, a single mapping for
item-triggered ones). Each parameter carries the point ``name`` and its
positional ``value`` array, decoded here through ``ValueLayout``.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from chartwise.charts.scatter_component.series import NAME_SEPARATOR, ValueLayout
from chartwise.charts.shared.channels import ChannelBindings
from chartwise.charts.shared.value_format import get_column_render_name, value_formatter
from chartwise.models.types import ChannelKind

LINE_BREAK = "<br />"


class ScatterTooltipFormatter:
    """Render the hovered point as one line per bound field.

    Output lines, in order:
        - ``<grouping fields>: <point name>`` when grouping fields are bound
        - one line per aggregate field, then per info field
        - the first size field with the point's size value
        - the first color field with the point's series key

    Size and color slots without a bound field are internal and never shown.
    """

    __slots__ = ("channels", "layout")

    def __init__(self, channels: ChannelBindings):
        self.channels = channels
        self.layout = ValueLayout(
            aggregate_count=len(channels[ChannelKind.AGGREGATE]),
            info_count=len(channels[ChannelKind.INFO]),
            color_grouped=bool(channels[ChannelKind.COLOR]),
        )

    def __call__(self, params: Sequence[Mapping[str, Any]] | Mapping[str, Any]) -> str:
        if isinstance(params, Mapping):
            params = [params]
        if not params:
            return ""
        hovered = params[0]
        fields = self.layout.decode(hovered.get("value") or [])

        lines = []
        groups = self.channels[ChannelKind.GROUP]
        if groups:
            header = NAME_SEPARATOR.join(get_column_render_name(binding) for binding in groups)
            lines.append(f"{header}: {hovered.get('name', '')}")

        for binding, value in zip(self.channels[ChannelKind.AGGREGATE], fields["aggregates"]):
            lines.append(value_formatter(binding, value))
        for binding, value in zip(self.channels[ChannelKind.INFO], fields["infos"]):
            lines.append(value_formatter(binding, value))

        sizes = self.channels[ChannelKind.SIZE]
        if sizes:
            lines.append(value_formatter(sizes[0], fields["size_value"]))
        colors = self.channels[ChannelKind.COLOR]
        if colors:
            lines.append(value_formatter(colors[0], fields["color_key"]))

        return LINE_BREAK.join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScatterTooltipFormatter):
            return NotImplemented
        return self.channels == other.channels

    def __repr__(self) -> str:
        counts = {kind.value: len(bindings) for kind, bindings in self.channels.items()}
        return f"ScatterTooltipFormatter({counts})"
