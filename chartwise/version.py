"""
Version retrieval module.

This module provides a way to get the project version from pyproject.toml.
"""

import tomli
from pydantic import validate_call

from chartwise import BASE_PATH
from chartwise.configs.logging_init import logger


@validate_call(validate_return=True)
def get_version() -> str:
    """
    Retrieve the version from pyproject.toml.

    Returns:
        str: Project version
    """
    pyproject_path = BASE_PATH / "pyproject.toml"

    with open(pyproject_path, "rb") as f:
        pyproject_data = tomli.load(f)

    version = pyproject_data["project"]["version"]
    logger.debug(f"Project version: {version}")

    return version
