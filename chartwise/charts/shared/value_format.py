"""
Display formatting of bound-field values (tooltips, reference labels).
"""

import math
from numbers import Number
from typing import Any

from chartwise.models.chart_config import FieldBinding, FieldFormat
from chartwise.models.types import FormatKind

EMPTY_VALUE = "-"


def get_value_by_column_key(binding: FieldBinding | None) -> str:
    """Dataset column key of a binding, ``""`` when nothing is bound."""
    if binding is None:
        return ""
    return binding.value_key


def get_column_render_name(binding: FieldBinding | None) -> str:
    if binding is None:
        return "[unknown]"
    return binding.render_name


def to_number(value: Any) -> float | None:
    """Coerce a cell to a finite float, None for anything non-numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Number):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _fixed(number: float, fmt: FieldFormat) -> str:
    separator = "," if fmt.use_thousand_separator else ""
    if fmt.decimal_places is None:
        if number.is_integer():
            return f"{int(number):{separator}}"
        return f"{number:{separator}}"
    return f"{number:{separator}.{fmt.decimal_places}f}"


def format_value(value: Any, fmt: FieldFormat | None = None) -> str:
    """Format a cell for display according to a binding's format.

    Non-numeric cells pass through as strings; ``None`` renders as ``-``.

    Example:
        >>> format_value(0.256, FieldFormat(type="percentage", decimal_places=1))
        '25.6%'
    """
    if value is None:
        return EMPTY_VALUE
    number = to_number(value)
    if fmt is None or fmt.type == FormatKind.DEFAULT or number is None:
        return str(value)

    if fmt.type == FormatKind.NUMERIC:
        body = _fixed(number, fmt)
    elif fmt.type == FormatKind.CURRENCY:
        body = f"{fmt.currency}{_fixed(number, fmt)}"
    elif fmt.type == FormatKind.PERCENTAGE:
        places = 0 if fmt.decimal_places is None else fmt.decimal_places
        body = f"{number * 100:.{places}f}%"
    elif fmt.type == FormatKind.SCIENTIFIC:
        places = 2 if fmt.decimal_places is None else fmt.decimal_places
        body = f"{number:.{places}e}"
    else:
        body = str(value)
    return f"{fmt.prefix}{body}{fmt.suffix}"


def value_formatter(binding: FieldBinding, value: Any) -> str:
    """One tooltip line: ``<render name>: <formatted value>``."""
    return f"{get_column_render_name(binding)}: {format_value(value, binding.format)}"
