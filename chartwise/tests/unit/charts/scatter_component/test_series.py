"""Unit tests for scatter series construction and symbol sizing."""

import pytest

from chartwise.charts.scatter_component.series import (
    SizeScale,
    SymbolSizeFn,
    ValueLayout,
    build_scatter_series,
    get_cycle_ratio,
    get_size_scale,
    group_rows_by_color,
)
from chartwise.charts.shared.channels import classify_bindings
from chartwise.charts.shared.projection import project_rows
from chartwise.configs.settings_models import ScatterConfig
from chartwise.models.chart_config import FieldBinding
from chartwise.models.dataset import ChartDataset

CONFIG = ScatterConfig(base_pixel_size=10, min_symbol_size=3, max_symbol_size=64)


def _series(dataset, config):
    return build_scatter_series(project_rows(dataset), classify_bindings(config.datas), config)


# =============================================================================
# Size scale
# =============================================================================


class TestSizeScale:
    """Tests for the shared size scale."""

    def test_global_min_max(self, sample_dataset):
        rows = [row for row, _ in project_rows(sample_dataset)]
        assert get_size_scale(rows, FieldBinding(colName="size")) == SizeScale(5, 25)

    def test_ignores_non_numeric_cells(self):
        rows = [{"s": "x"}, {"s": 4}, {"s": None}, {"s": "9"}]
        assert get_size_scale(rows, FieldBinding(colName="s")) == SizeScale(4, 9)

    def test_fallback_without_binding(self):
        config = ScatterConfig(default_size_min=0, default_size_max=50)
        assert get_size_scale([{"s": 1}], None, config) == SizeScale(0, 50)

    def test_fallback_without_numeric_values(self):
        assert get_size_scale([{"s": "x"}], FieldBinding(colName="s"), CONFIG) == SizeScale(0, 100)

    def test_default_size_value(self):
        assert SizeScale(5, 25).default_size_value == 10
        assert SizeScale(3, 3).is_flat


class TestValueLayout:
    """Tests for the positional value layout."""

    def test_indices_without_color(self):
        layout = ValueLayout(aggregate_count=2, info_count=1, color_grouped=False)
        assert (layout.size_index, layout.color_index) == (3, None)

    def test_decode_with_color(self):
        layout = ValueLayout(aggregate_count=1, info_count=1, color_grouped=True)
        assert layout.decode([42, "north", 17, "A"]) == {
            "aggregates": [42],
            "infos": ["north"],
            "size_value": 17,
            "color_key": "A",
        }

    def test_decode_short_array(self):
        layout = ValueLayout(aggregate_count=1, info_count=0, color_grouped=True)
        assert layout.decode([1])["size_value"] is None


# =============================================================================
# Symbol size
# =============================================================================


class TestSymbolSizeFn:
    """Tests for the radius function."""

    layout = ValueLayout(aggregate_count=1, info_count=0, color_grouped=False)

    def test_linear_within_bounds(self):
        size_fn = SymbolSizeFn(self.layout, SizeScale(0, 100), 1, CONFIG)
        assert size_fn([0, 50]) == 5
        assert size_fn([0, 100]) == 10

    def test_clamped_to_pixel_range(self):
        size_fn = SymbolSizeFn(self.layout, SizeScale(0, 100), 20, CONFIG)
        assert size_fn([0, 1]) == 3
        assert size_fn([0, 100]) == 64

    def test_monotonic_in_size_value(self):
        size_fn = SymbolSizeFn(self.layout, SizeScale(5, 25), 3, CONFIG)
        radii = [size_fn([0, value]) for value in (5, 10, 15, 20, 25)]
        assert radii == sorted(radii)

    @pytest.mark.parametrize("value", [7, 0, None, "n/a"])
    def test_flat_scale_is_finite(self, value):
        size_fn = SymbolSizeFn(self.layout, SizeScale(7, 7), 1, CONFIG)
        assert size_fn([0, value]) == 5

    def test_negative_scale(self):
        size_fn = SymbolSizeFn(self.layout, SizeScale(-10, 10), 1, CONFIG)
        assert size_fn([0, 0]) == 5

    def test_equality(self):
        first = SymbolSizeFn(self.layout, SizeScale(0, 10), 1, CONFIG)
        assert first == SymbolSizeFn(self.layout, SizeScale(0, 10), 1, CONFIG)
        assert first != SymbolSizeFn(self.layout, SizeScale(0, 20), 1, CONFIG)

    def test_cycle_ratio_style(self, make_chart_config):
        assert get_cycle_ratio(make_chart_config()) == 1
        assert get_cycle_ratio(make_chart_config(styles={"scatter": {"cycleRatio": 2.5}})) == 2.5
        assert get_cycle_ratio(make_chart_config(styles={"scatter": {"cycleRatio": -1}})) == 1


# =============================================================================
# Series
# =============================================================================


class TestGroupRowsByColor:
    """Tests for the color partition."""

    def test_partition_is_exhaustive_and_disjoint(self, sample_dataset):
        rows = project_rows(sample_dataset)
        groups = group_rows_by_color(rows, FieldBinding(colName="category"))

        assert [group.key for group in groups] == ["A", "B"]
        assert sum(len(group.rows) for group in groups) == len(rows)
        assert [row["value"] for row, _ in groups[0].rows] == [10, 30]

    def test_keys_compare_by_string_form(self):
        dataset = ChartDataset(columns=["k", "v"], rows=[[1, 10], [True, 20], ["1", 30]])
        binding = FieldBinding.model_validate(
            {"colName": "k", "color": {"colors": [{"key": 1, "value": "#f00"}]}}
        )

        groups = group_rows_by_color(project_rows(dataset), binding)

        assert [group.key for group in groups] == ["1", "True"]
        assert [[row["v"] for row, _ in group.rows] for group in groups] == [[10, 30], [20]]
        assert [group.color for group in groups] == ["#f00", None]

    def test_palette_miss_has_no_color(self, sample_dataset):
        binding = FieldBinding.model_validate(
            {"colName": "category", "color": {"colors": [{"key": "A", "value": "#f00"}]}}
        )
        groups = group_rows_by_color(project_rows(sample_dataset), binding)
        assert [group.color for group in groups] == ["#f00", None]


class TestBuildScatterSeries:
    """Tests for build_scatter_series."""

    def test_single_series_without_color(self, sample_dataset, grouped_config):
        series = _series(sample_dataset, grouped_config)

        assert len(series) == 1
        only = series[0]
        assert only.name == "category"
        assert [point.name for point in only.data] == ["A", "B", "A"]
        assert [point.value for point in only.data] == [[10, 5], [20, 15], [30, 25]]
        assert only.symbol_size.scale == SizeScale(5, 25)
        assert only.encode == {"x": 0, "y": 0}
        assert only.item_style is None

    def test_one_series_per_color(self, sample_dataset, color_config):
        series = _series(sample_dataset, color_config)

        assert [s.name for s in series] == ["A", "B"]
        assert [s.item_style for s in series] == [{"color": "#f00"}, {"color": "#0f0"}]
        assert [len(s.data) for s in series] == [2, 1]
        assert series[0].data[1].value == [30, 25, "A"]
        # The scale stays global across series
        assert {s.symbol_size.scale for s in series} == {SizeScale(5, 25)}

    def test_series_names_unique_for_mixed_key_types(self, make_chart_config):
        dataset = ChartDataset(columns=["k", "v"], rows=[[1, 10], [True, 20], ["1", 30]])
        series = _series(dataset, make_chart_config(aggregate=["v"], color=["k"]))

        assert [s.name for s in series] == ["1", "True"]
        assert [len(s.data) for s in series] == [2, 1]

    def test_falsy_size_uses_scale_middle(self, make_chart_config):
        dataset = ChartDataset(columns=["v", "s"], rows=[[1, 10], [2, 0], [3, 30]])
        series = _series(dataset, make_chart_config(aggregate=["v"], size=["s"]))
        # Scale is (0, 30), so the zero cell becomes 15
        assert [point.size_value for point in series[0].data] == [10, 15, 30]

    def test_two_aggregates_encode_y(self, make_chart_config):
        dataset = ChartDataset(columns=["x", "y"], rows=[[1, 2]])
        series = _series(dataset, make_chart_config(aggregate=["x", "y"]))
        assert series[0].encode == {"x": 0, "y": 1}

    def test_empty_dataset_has_no_series(self, grouped_config):
        dataset = ChartDataset(columns=["category", "value", "size"], rows=[])
        assert _series(dataset, grouped_config) == []

    def test_point_serializes_with_payload(self, sample_dataset, grouped_config):
        point = _series(sample_dataset, grouped_config)[0].data[0]
        assert point.model_dump() == {
            "rowData": {"category": "A", "value": 10, "size": 5},
            "name": "A",
            "value": [10, 5],
        }
