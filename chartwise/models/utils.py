import os
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, validate_call

from chartwise.models.chart_config import ChartConfig
from chartwise.models.dataset import ChartDataset
from chartwise.configs.logging_init import logger


@validate_call
def get_config(filename: str) -> dict:
    """
    Get the config file.
    """
    if not filename.endswith((".yaml", ".yml")):
        raise ValueError("Invalid config file. Must be a YAML file.")
    if not os.path.exists(filename):
        raise ValueError(f"The file '{filename}' does not exist.")
    if not os.path.isfile(filename):
        raise ValueError(f"'{filename}' is not a file.")
    with open(filename) as f:
        yaml_data = yaml.safe_load(f)
    if not isinstance(yaml_data, dict):
        raise ValueError("Invalid config file: expected a dictionary.")
    return yaml_data


def validate_model_config(config: Any, pydantic_model: type[BaseModel]) -> BaseModel:
    """
    Validate a raw configuration dictionary against a Pydantic model
    """
    if not isinstance(config, dict):
        raise ValueError("Invalid config. Must be a dictionary.")
    try:
        data = pydantic_model.model_validate(config)
        logger.debug(f"Resulting object model: {data}")
    except ValidationError as e:
        raise ValueError(f"Invalid config: {e}")
    return data


def load_chart_config(filename: str) -> ChartConfig:
    """Load a chart configuration from a YAML file."""
    return validate_model_config(get_config(filename), ChartConfig)  # type: ignore[return-value]


def load_dataset(filename: str) -> ChartDataset:
    """Load a dataset (``columns`` + ``rows``) from a YAML file."""
    return validate_model_config(get_config(filename), ChartDataset)  # type: ignore[return-value]
