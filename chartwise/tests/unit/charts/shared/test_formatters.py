"""Unit tests for axis, legend, label and grid formatters."""

from chartwise.charts.shared.formatters import get_axis, get_grid, get_label, get_legend
from chartwise.models.chart_config import FieldBinding

# =============================================================================
# Axis
# =============================================================================


class TestGetAxis:
    """Tests for get_axis."""

    def test_value_axis_from_style_group(self):
        styles = {
            "xAxis": {
                "showAxis": True,
                "inverseAxis": False,
                "lineStyle": {"color": "#ccc"},
                "showLabel": True,
                "font": {"fontSize": 12},
                "min": 0,
            }
        }

        axis = get_axis(styles, FieldBinding(colName="value"), "xAxis")

        assert axis.type == "value"
        assert axis.inverse is False
        assert axis.min == 0
        assert axis.axis_label == {"show": True, "fontSize": 12}
        assert axis.axis_line == {"show": True, "lineStyle": {"color": "#ccc"}}
        assert axis.axis_tick == {"show": True, "lineStyle": {"color": "#ccc"}}

    def test_name_requires_title_toggle(self):
        binding = FieldBinding(colName="value", aggregate="SUM")
        assert get_axis({}, binding, "yAxis").name is None

        styles = {"yAxis": {"showTitleAndUnit": True, "unitFont": {"color": "#999"}}}
        axis = get_axis(styles, binding, "yAxis")
        assert axis.name == "SUM(value)"
        assert axis.name_text_style == {"color": "#999"}

    def test_no_binding_no_name(self):
        assert get_axis({"yAxis": {"showTitleAndUnit": True}}, None, "yAxis").name is None

    def test_split_line_keys_per_axis(self):
        styles = {
            "splitLine": {
                "showHorizonLine": True,
                "horizonLineStyle": {"type": "dashed"},
                "showVerticalLine": False,
            }
        }
        assert get_axis(styles, None, "xAxis").split_line == {"show": True, "lineStyle": {"type": "dashed"}}
        assert get_axis(styles, None, "yAxis").split_line == {"show": False}

    def test_unset_styles_are_dropped(self):
        dumped = get_axis({}, None, "xAxis").model_dump(by_alias=True, exclude_none=True)
        assert dumped == {
            "type": "value",
            "axisLabel": {},
            "axisLine": {},
            "axisTick": {},
            "splitLine": {},
        }


# =============================================================================
# Legend, label, grid
# =============================================================================


class TestGetLegend:
    """Tests for get_legend."""

    def test_defaults_to_right_and_all_selected(self):
        legend = get_legend({}, ["A", "B"])

        assert legend.orient == "vertical"
        assert legend.right == 8
        assert legend.width == 96
        assert legend.selected == {"A": True, "B": True}
        assert legend.data == ["A", "B"]

    def test_bottom_preset(self):
        legend = get_legend({"legend": {"position": "bottom", "showLegend": True, "type": "scroll"}}, ["A"])

        assert legend.orient == "horizontal"
        assert (legend.bottom, legend.left, legend.right, legend.height) == (8, 8, 8, 32)
        assert legend.top is None
        assert legend.show is True
        assert legend.type == "scroll"

    def test_select_all_false(self):
        legend = get_legend({"legend": {"selectAll": False}}, ["A", "B"])
        assert legend.selected == {"A": False, "B": False}

    def test_unknown_position_falls_back_to_right(self):
        assert get_legend({"legend": {"position": "center"}}, []).right == 8

    def test_malformed_position_falls_back_to_right(self):
        for position in (["top"], {"side": "top"}, 3):
            legend = get_legend({"legend": {"position": position}}, ["A"])
            assert legend.orient == "vertical"
            assert legend.right == 8

    def test_no_series(self):
        legend = get_legend({}, [])
        assert legend.data == []
        assert legend.selected == {}


class TestGetLabel:
    def test_formatter_is_point_name(self):
        label = get_label({"label": {"showLabel": True, "position": "top", "font": {"fontSize": 10}}})
        assert label == {
            "label": {"show": True, "position": "top", "fontSize": 10, "formatter": "{b}"},
            "labelLayout": {"hideOverlap": True},
        }

    def test_unset_label(self):
        assert get_label({})["label"] == {"formatter": "{b}"}


class TestGetGrid:
    def test_margins(self):
        styles = {"margin": {"containLabel": True, "marginLeft": "5%", "marginTop": 40}}
        grid = get_grid(styles)
        assert grid.model_dump(by_alias=True, exclude_none=True) == {
            "left": "5%",
            "top": 40,
            "containLabel": True,
        }
