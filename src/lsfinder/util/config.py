# (c) Copyright IBM Corp. 2025

import os
from typing import Any, Dict, Optional, Union

from lsfinder.log import logger
from lsfinder.util.config_reader import ConfigReader

CONFIG_PATH_ENV = "LSFINDER_CONFIG_PATH"
DISCOVERY_CONFIG_KEY = "discovery"


def parse_positive_int(name: str, value: Any) -> Optional[int]:
    """
    Converts <value> to an integer greater than zero.

    @param name: the setting name, used for the warning message
    @param value: raw value from the environment or a configuration file
    @return: the integer or None if <value> is not usable
    """
    try:
        number = int(value)
    except (ValueError, TypeError):
        logger.warning(f"Invalid {name} value: {value}. Must be an integer.")
        return None

    if number < 1:
        logger.warning(f"{name} must be positive, got: {number}.")
        return None
    return number


def parse_non_negative_float(name: str, value: Any) -> Optional[float]:
    """
    Converts <value> to a number of seconds that is zero or more.

    @param name: the setting name, used for the warning message
    @param value: raw value from the environment or a configuration file
    @return: the float or None if <value> is not usable
    """
    try:
        number = float(value)
    except (ValueError, TypeError):
        logger.warning(f"Invalid {name} value: {value}. Must be a number.")
        return None

    if number < 0:
        logger.warning(f"{name} must not be negative, got: {number}.")
        return None
    return number


def parse_positive_float(name: str, value: Any) -> Optional[float]:
    """
    Converts <value> to a number of seconds greater than zero, as required by
    the HTTP and subprocess timeouts.
    """
    number = parse_non_negative_float(name, value)
    if number is None:
        return None

    if number == 0:
        logger.warning(f"{name} must be positive, got: {number}.")
        return None
    return number


def get_discovery_config_from_yaml(
    file_path: Optional[Union[str, os.PathLike]] = None,
) -> Dict[str, Any]:
    """
    Reads the "discovery" section of the YAML file named by LSFINDER_CONFIG_PATH.

    Example file:

        discovery:
          max_retries: 3
          retry_delay: 0.5
          probe_timeout: 2

    @param file_path: overrides the LSFINDER_CONFIG_PATH environment variable
    @return: the section as a dict, empty if there is none
    """
    if file_path is None:
        file_path = os.environ.get(CONFIG_PATH_ENV, "")
    if not file_path:
        return {}

    config_reader = ConfigReader(file_path)
    section = (
        config_reader.data.get(DISCOVERY_CONFIG_KEY)
        if isinstance(config_reader.data, dict)
        else None
    )
    if not isinstance(section, dict):
        logger.debug(
            f"get_discovery_config_from_yaml: no '{DISCOVERY_CONFIG_KEY}' section in {file_path}"
        )
        return {}
    return section
