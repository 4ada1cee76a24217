"""Shared fixtures for chartwise unit tests."""

from typing import Any

import pytest

from chartwise.models.chart_config import ChartConfig
from chartwise.models.dataset import ChartDataset


class RecordingSurface:
    """In-memory plotting surface recording every call made by a chart."""

    def __init__(self, container: Any = None, theme: str = "default"):
        self.container = container
        self.theme = theme
        self.calls: list[tuple[str, Any]] = []
        self.options: dict[str, Any] | None = None
        self.handlers: dict[str, list] = {}
        self.disposed = False

    def set_option(self, options, not_merge=False):
        self.calls.append(("set_option", not_merge))
        self.options = options

    def clear(self):
        self.calls.append(("clear", None))
        self.options = None

    def resize(self, hints=None, context=None):
        self.calls.append(("resize", hints))

    def dispose(self):
        self.calls.append(("dispose", None))
        self.disposed = True

    def on(self, event_name, callback):
        self.handlers.setdefault(event_name, []).append(callback)


def make_config(
    group: list[str] | None = None,
    aggregate: list[str] | None = None,
    size: list[str] | None = None,
    color: list[str] | None = None,
    info: list[str] | None = None,
    palette: dict[str, str] | None = None,
    styles: dict[str, Any] | None = None,
    settings: dict[str, Any] | None = None,
) -> ChartConfig:
    """Build a config binding plain (non-aggregated) columns per channel."""
    datas = []
    for channel, columns in (
        ("group", group),
        ("aggregate", aggregate),
        ("size", size),
        ("color", color),
        ("info", info),
    ):
        if not columns:
            continue
        rows = []
        for column in columns:
            binding: dict[str, Any] = {"uid": f"{channel}-{column}", "colName": column}
            if channel == "color" and palette is not None:
                binding["color"] = {"colors": [{"key": k, "value": v} for k, v in palette.items()]}
            rows.append(binding)
        datas.append({"type": channel, "rows": rows})
    return ChartConfig.model_validate(
        {"datas": datas, "styles": styles or {}, "settings": settings or {}}
    )


@pytest.fixture
def make_chart_config():
    return make_config


@pytest.fixture
def sample_dataset() -> ChartDataset:
    """Dataset with columns [category, value, size] and three rows."""
    return ChartDataset(
        columns=[{"name": "category"}, {"name": "value"}, {"name": "size"}],
        rows=[["A", 10, 5], ["B", 20, 15], ["A", 30, 25]],
    )


@pytest.fixture
def grouped_config() -> ChartConfig:
    """category -> group, value -> aggregate, size -> size; no color channel."""
    return make_config(group=["category"], aggregate=["value"], size=["size"])


@pytest.fixture
def color_config() -> ChartConfig:
    """Same bindings plus a color channel on category with a palette."""
    return make_config(
        group=["category"],
        aggregate=["value"],
        size=["size"],
        color=["category"],
        palette={"A": "#f00", "B": "#0f0"},
    )


@pytest.fixture
def recording_surface_factory():
    created: list[RecordingSurface] = []

    def factory(container, theme):
        surface = RecordingSurface(container, theme)
        created.append(surface)
        return surface

    factory.created = created
    return factory
