"""
Scatter render spec assembly: dataset + config -> options for the surface.
"""

from chartwise.charts.scatter_component.series import build_scatter_series
from chartwise.charts.scatter_component.tooltip import ScatterTooltipFormatter
from chartwise.charts.shared.channels import classify_bindings
from chartwise.charts.shared.formatters import get_axis, get_grid, get_legend
from chartwise.charts.shared.projection import RowPayloadExtractor, extract_row_payload, project_rows
from chartwise.configs.logging_init import logger
from chartwise.models.chart_config import ChartConfig
from chartwise.models.dataset import ChartDataset
from chartwise.models.render_spec import RenderOptions, TooltipSpec
from chartwise.models.types import ChannelKind


def build_scatter_options(
    dataset: ChartDataset,
    config: ChartConfig,
    extractor: RowPayloadExtractor = extract_row_payload,
) -> RenderOptions:
    """Derive the complete scatter render spec.

    Callers are expected to have checked the chart requirements first; this
    function recomputes everything from its two inputs and keeps no state.

    Args:
        dataset: Result set of the chart query.
        config: Chart configuration (bindings, styles, settings).
        extractor: Per-row auxiliary payload extractor threaded onto points.

    Returns:
        RenderOptions; call ``to_options()`` for the surface mapping.
    """
    channels = classify_bindings(config.datas)
    column_names = set(dataset.column_names)
    for kind, bindings in channels.items():
        for binding in bindings:
            if binding.value_key not in column_names:
                logger.warning(
                    f"{kind.value} field '{binding.value_key}' has no matching dataset column"
                )

    rows = project_rows(dataset, extractor)
    series = build_scatter_series(rows, channels, config)
    logger.debug(f"Built {len(series)} scatter series from {len(rows)} rows")

    aggregates = channels[ChannelKind.AGGREGATE]
    return RenderOptions(
        tooltip=TooltipSpec(trigger="axis", formatter=ScatterTooltipFormatter(channels)),
        legend=get_legend(config.styles, [s.name for s in series]),
        grid=get_grid(config.styles),
        x_axis=get_axis(config.styles, aggregates[0] if aggregates else None, "xAxis"),
        y_axis=get_axis(config.styles, aggregates[1] if len(aggregates) > 1 else None, "yAxis"),
        series=series,
    )
