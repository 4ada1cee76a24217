import logging
import re
import sys
from typing import Any

import pydantic
from colorlog import ColoredFormatter


def format_pydantic(
    model: pydantic.BaseModel, max_line_length: int = 80, color: bool = True
) -> str:
    """
    Format a Pydantic model with custom styling for use in f-strings.

    Args:
        model: A Pydantic model instance
        max_line_length: Maximum length for single-line representation
        color: Whether to apply ANSI color formatting

    Returns:
        Formatted string representation of the model
    """
    if not isinstance(model, pydantic.BaseModel):
        return str(model)

    model_dict = model.model_dump()
    model_name = model.__class__.__name__

    items = [f"{key}={_plain_format_value(value)}" for key, value in model_dict.items()]
    if color:
        formatted_items = [
            f"\033[33m{key}\033[0m={_color_format_value(value)}"
            for key, value in model_dict.items()
        ]
        header = f"\033[1;95m{model_name}\033[0m"
    else:
        formatted_items = items
        header = model_name

    plain_text_length = len(f"{model_name}({', '.join(items)})")
    if plain_text_length <= max_line_length:
        return f"{header}({', '.join(formatted_items)})"

    lines = [f"{header}("]
    lines.extend(f"    {item}," for item in formatted_items)
    lines.append(")")
    return "\n".join(lines)


def _plain_format_value(value: Any) -> str:
    if isinstance(value, str):
        if len(value) > 30:
            return f"'{value[:27]}...'"
        return f"'{value}'"
    elif isinstance(value, list | tuple):
        if len(value) <= 3:
            return repr(value)
        return f"[{len(value)} items]"
    elif isinstance(value, dict):
        if len(value) <= 2:
            return repr(value)
        return f"{{{len(value)} items}}"
    return repr(value)


def _color_format_value(value: Any) -> str:
    if value is None:
        return "\033[2mNone\033[0m"  # Dimmed for None values
    elif isinstance(value, bool):
        return "\033[1;92mTrue\033[0m" if value else "\033[1;91mFalse\033[0m"
    elif isinstance(value, int | float):
        return f"\033[36m{value}\033[0m"  # Cyan for numbers
    elif isinstance(value, str):
        return f"\033[32m{_plain_format_value(value)}\033[0m"  # Green for strings
    return _plain_format_value(value)


class ChartwiseFormatter(ColoredFormatter):
    """Colored formatter that renders pydantic models compactly."""

    def format(self, record):
        if isinstance(record.msg, pydantic.BaseModel):
            record.msg = format_pydantic(record.msg)

        # Shorten pathname to start from 'chartwise/'
        if hasattr(record, "pathname"):
            match = re.search(r"(chartwise/.*?)$", record.pathname)
            if match:
                record.pathname = match.group(1)

        return super().format(record)


def setup_logging(name=None, level="INFO"):
    """
    Set up the chartwise logger with:
    - Path from chartwise folder only
    - Colored level name
    - Bold line number and function name
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name or "chartwise")
    logger.setLevel(numeric_level)
    logger.propagate = True

    # Remove any existing handlers to avoid duplicates
    if logger.handlers:
        logger.handlers = []

    formatter = ChartwiseFormatter(
        "%(asctime)s - %(log_color)s%(levelname)s%(reset)s - %(pathname)s:%(bold)s%(lineno)d%(reset)s - %(bold)s%(funcName)s%(reset)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        reset=True,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
        secondary_log_colors={
            "bold": {
                "DEBUG": "bold",
                "INFO": "bold",
                "WARNING": "bold",
                "ERROR": "bold",
                "CRITICAL": "bold",
            }
        },
        style="%",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


# The logger will be initialized by logging_init.py
