"""
Dataset Models.

A chart receives its result set as ordered column descriptors plus ordered
rows of scalar cells aligned positionally with the columns.
"""

from __future__ import annotations

from typing import Any

import polars as pl
from pydantic import BaseModel, ConfigDict, Field, model_validator

from chartwise.configs.logging_init import logger


class DatasetColumn(BaseModel):
    """Descriptor of one result-set column."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Column identity, e.g. 'SUM(amount)'")
    type: str | None = Field(default=None, description="Column type reported by the query layer")
    format: dict[str, Any] | None = Field(default=None, description="Column-level format hints")


class ChartDataset(BaseModel):
    """Tabular result set handed to a chart on every update.

    Example YAML:
        columns:
          - name: category
          - name: SUM(value)
        rows:
          - [A, 10]
          - [B, 20]
    """

    model_config = ConfigDict(populate_by_name=True)

    columns: list[DatasetColumn] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def coerce_column_names(cls, data: Any) -> Any:
        """Allow bare strings as column descriptors."""
        if isinstance(data, dict) and isinstance(data.get("columns"), list):
            data = dict(data)
            data["columns"] = [
                {"name": column} if isinstance(column, str) else column
                for column in data["columns"]
            ]
        return data

    @model_validator(mode="after")
    def check_shape(self) -> "ChartDataset":
        """Every row must carry exactly one cell per column."""
        names = self.column_names
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate column names in dataset: {duplicates}")

        width = len(names)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {index} has {len(row)} values but the dataset has {width} columns"
                )
        return self

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    @classmethod
    def from_polars(cls, df: pl.DataFrame) -> "ChartDataset":
        """Build a dataset from a polars DataFrame, keeping column order."""
        columns = [
            DatasetColumn(name=name, type=str(dtype)) for name, dtype in df.schema.items()
        ]
        rows = [list(row) for row in df.iter_rows()]
        logger.debug(f"Dataset from polars: {len(columns)} columns, {len(rows)} rows")
        return cls(columns=columns, rows=rows)
