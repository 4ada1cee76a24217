"""
Row projection: columnar rows to row objects keyed by column name.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from chartwise.models.dataset import ChartDataset, DatasetColumn

ProjectedRow = dict[str, Any]
RowPayloadExtractor = Callable[[Mapping[str, Any]], dict[str, Any]]


def transform_to_object_array(
    rows: Sequence[Sequence[Any]], columns: Sequence[DatasetColumn]
) -> list[ProjectedRow]:
    names = [column.name for column in columns]
    return [dict(zip(names, row)) for row in rows]


def extract_row_payload(row: Mapping[str, Any]) -> dict[str, Any]:
    """Auxiliary payload threaded onto a point for drill-down and links.

    The payload is opaque to the engine; it never takes part in geometry.
    """
    return {"rowData": dict(row)}


def project_rows(
    dataset: ChartDataset,
    extractor: RowPayloadExtractor = extract_row_payload,
) -> list[tuple[ProjectedRow, dict[str, Any]]]:
    """Project every dataset row and pair it with its extracted payload."""
    projected = transform_to_object_array(dataset.rows, dataset.columns)
    return [(row, extractor(row)) for row in projected]
