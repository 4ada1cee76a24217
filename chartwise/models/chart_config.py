"""
Chart Configuration Models.

Typed Pydantic models for the declarative configuration produced by the chart
editor: channel-grouped field bindings (``datas``), the visual style tree
(``styles``) and chart settings (``settings``, e.g. reference marks).

Architecture:
    ChartConfig
        ├── datas: list[DataSection]      (one section per channel)
        │       └── rows: list[FieldBinding]
        ├── styles: style tree            (group -> key -> value)
        └── settings: style tree          (reference lines / areas)

Both style trees accept either nested mappings or the editor's row-list form,
which is normalised to nested mappings on validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from chartwise.models.types import AggregateKind, ChannelKind, FormatKind, ReferenceValueKind

StyleTree = dict[str, Any]

# A channel count bound: exact count, or inclusive (min, max)
CountBound = int | tuple[int, int]


def normalize_style_tree(raw: Any) -> StyleTree:
    """Normalise a style tree into nested ``group -> key -> value`` mappings.

    The editor stores styles as nested rows::

        [{"key": "legend", "rows": [{"key": "showLegend", "value": True}]}]

    A row carrying ``rows`` but no ``value`` becomes a nested group. A row that
    carries both keeps its value and its children are merged into the
    enclosing group. Plain mappings are returned unchanged.
    """
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return dict(raw)
    if not isinstance(raw, list):
        raise ValueError(f"Style tree must be a mapping or a list of rows, got {type(raw).__name__}")

    tree: StyleTree = {}
    for row in raw:
        if not isinstance(row, Mapping) or "key" not in row:
            raise ValueError(f"Style row must be a mapping with a 'key', got {row!r}")
        key = row["key"]
        children = row.get("rows")
        has_value = "value" in row or "default" in row
        if has_value:
            tree[key] = row["value"] if "value" in row else row["default"]
            if children:
                for child_key, child_value in normalize_style_tree(children).items():
                    tree.setdefault(child_key, child_value)
        else:
            tree[key] = normalize_style_tree(children or [])
    return tree


# =============================================================================
# Field bindings
# =============================================================================


class FieldAlias(BaseModel):
    """Display name override for a bound field."""

    name: str | None = None


class FieldFormat(BaseModel):
    """Number format applied to a bound field's values in tooltips."""

    model_config = ConfigDict(populate_by_name=True)

    type: FormatKind = FormatKind.DEFAULT
    decimal_places: int | None = Field(default=None, alias="decimalPlaces", ge=0, le=20)
    use_thousand_separator: bool = Field(default=False, alias="useThousandSeparator")
    prefix: str = ""
    suffix: str = ""
    currency: str = ""

    @model_validator(mode="before")
    @classmethod
    def flatten_type_options(cls, data: Any) -> Any:
        """Lift ``{"type": "numeric", "numeric": {...}}`` options to the top level."""
        if isinstance(data, Mapping):
            format_type = data.get("type")
            nested = data.get(format_type) if isinstance(format_type, str) else None
            if isinstance(nested, Mapping):
                merged = {k: v for k, v in data.items() if k != format_type}
                merged.update(nested)
                return merged
        return data


class ColorEntry(BaseModel):
    """One key -> color assignment of a color binding's palette."""

    key: Any
    value: str


class ColorPalette(BaseModel):
    """Key -> color palette carried by a color-channel binding."""

    colors: list[ColorEntry] = Field(default_factory=list)

    def lookup(self, key: Any) -> str | None:
        """Return the color assigned to ``key``; keys compare by their string form."""
        for entry in self.colors:
            if str(entry.key) == str(key):
                return entry.value
        return None


class FieldBinding(BaseModel):
    """A dataset column bound to a chart channel.

    Example YAML:
        - uid: f1
          colName: value
          aggregate: SUM
          alias:
            name: Revenue
          format:
            type: numeric
            numeric:
              decimalPlaces: 2
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    uid: str | None = Field(default=None, description="Stable identifier of the binding")
    col_name: str = Field(..., alias="colName", description="Underlying column name")
    aggregate: AggregateKind | None = Field(default=None, description="Aggregation kind")
    alias: FieldAlias | None = Field(default=None, description="Display name override")
    format: FieldFormat | None = Field(default=None, description="Tooltip value format")
    color: ColorPalette | None = Field(default=None, description="Palette for color bindings")

    @field_validator("aggregate", mode="before")
    @classmethod
    def normalize_aggregate(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper() or None
        return v

    @property
    def value_key(self) -> str:
        """Key of the dataset column holding this binding's values."""
        if self.aggregate is None or self.aggregate == AggregateKind.NONE:
            return self.col_name
        return f"{self.aggregate.value}({self.col_name})"

    @property
    def render_name(self) -> str:
        """Name shown to users: alias, else ``AGG(col)``, else the column name."""
        if self.alias is not None and self.alias.name:
            return self.alias.name
        return self.value_key


class DataSection(BaseModel):
    """A channel-typed collection of bindings as laid out by the editor."""

    type: ChannelKind | str
    key: str | None = None
    rows: list[FieldBinding] = Field(default_factory=list)

    @field_validator("rows", mode="before")
    @classmethod
    def default_rows(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def channel(self) -> ChannelKind | None:
        """The channel this section feeds, or None for non-channel sections (filters...)."""
        if isinstance(self.type, ChannelKind):
            return self.type
        try:
            return ChannelKind(self.type)
        except ValueError:
            return None


# =============================================================================
# Requirements
# =============================================================================


class ChartRequirement(BaseModel):
    """Binding counts a chart kind needs before it can render.

    A bound is either an exact count or an inclusive ``(min, max)`` range.
    Channels without a bound are unconstrained.
    """

    bounds: dict[ChannelKind, CountBound] = Field(default_factory=dict)

    @field_validator("bounds")
    @classmethod
    def validate_bounds(cls, v: dict[ChannelKind, CountBound]) -> dict[ChannelKind, CountBound]:
        for kind, bound in v.items():
            low, high = (bound, bound) if isinstance(bound, int) else bound
            if low < 0 or high < low:
                raise ValueError(f"Invalid count bound for {kind.value}: {bound}")
        return v

    def is_satisfied_by(self, counts: Mapping[ChannelKind, int]) -> bool:
        for kind, bound in self.bounds.items():
            low, high = (bound, bound) if isinstance(bound, int) else bound
            if not low <= counts.get(kind, 0) <= high:
                return False
        return True


# =============================================================================
# Reference marks (chart settings)
# =============================================================================


class ReferenceBound(BaseModel):
    """Position of a reference mark along its metric's axis."""

    model_config = ConfigDict(populate_by_name=True)

    value_type: ReferenceValueKind = Field(default=ReferenceValueKind.CONSTANT, alias="valueType")
    constant_value: float | None = Field(default=None, alias="constantValue")


class ReferenceLine(ReferenceBound):
    """A horizontal or vertical reference line drawn at a metric statistic."""

    label: str | None = None
    enabled: bool = Field(default=True, alias="enableMarkLine")
    metric: str = Field(..., description="uid of the aggregate binding the line follows")
    show_label: bool | None = Field(default=None, alias="showLabel")
    position: str | None = None
    font: dict[str, Any] | None = None
    line_style: dict[str, Any] | None = Field(default=None, alias="lineStyle")


class ReferenceArea(BaseModel):
    """A band between two reference bounds of one metric."""

    model_config = ConfigDict(populate_by_name=True)

    label: str | None = None
    enabled: bool = Field(default=True, alias="enableMarkArea")
    metric: str = Field(..., description="uid of the aggregate binding the area follows")
    start: ReferenceBound
    end: ReferenceBound
    show_label: bool | None = Field(default=None, alias="showLabel")
    position: str | None = None
    font: dict[str, Any] | None = None
    area_style: dict[str, Any] | None = Field(default=None, alias="areaStyle")


# =============================================================================
# Chart configuration
# =============================================================================


class ChartConfig(BaseModel):
    """Declarative chart configuration edited by the user.

    Example YAML:
        datas:
          - type: group
            rows: [{colName: category}]
          - type: aggregate
            rows: [{colName: value}]
        styles:
          legend:
            showLegend: true
            position: bottom
    """

    model_config = ConfigDict(extra="allow")

    datas: list[DataSection] = Field(default_factory=list)
    styles: StyleTree = Field(default_factory=dict)
    settings: StyleTree = Field(default_factory=dict)

    @field_validator("datas", mode="before")
    @classmethod
    def default_datas(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("styles", "settings", mode="before")
    @classmethod
    def normalize_trees(cls, v: Any) -> StyleTree:
        return normalize_style_tree(v)
