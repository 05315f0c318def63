# (c) Copyright IBM Corp. 2025

"""
Option classes for lsfinder

The description and hierarchy of the classes in this file are as follows:

BaseOptions - base class.  Holds the logging settings.
  - DiscoveryOptions - retry budget and timeouts of a discovery cycle.
"""

import logging
import os
from typing import Any, Callable, Dict, Optional

from lsfinder.configurator import config
from lsfinder.log import logger
from lsfinder.util.config import (
    get_discovery_config_from_yaml,
    parse_non_negative_float,
    parse_positive_float,
    parse_positive_int,
)

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARN,
    "warning": logging.WARN,
    "error": logging.ERROR,
}


class BaseOptions(object):
    """Base class for all option classes.  Holds items common to all"""

    def __init__(self, **kwds: Dict[str, Any]) -> None:
        self.debug = False
        self.log_level = logging.WARN

        if "LSFINDER_DEBUG" in os.environ:
            self.log_level = logging.DEBUG
            self.debug = True
        elif "LSFINDER_LOG_LEVEL" in os.environ:
            level = os.environ["LSFINDER_LOG_LEVEL"].lower()
            if level in LOG_LEVELS:
                self.log_level = LOG_LEVELS[level]
            else:
                logger.warning(
                    f"Invalid LSFINDER_LOG_LEVEL value: {level}. Must be one of {', '.join(LOG_LEVELS)}."
                )

        self.__dict__.update(kwds)


class DiscoveryOptions(BaseOptions):
    """
    Settings of a discovery cycle.

    The priority is as follows:
    environment variables > LSFINDER_CONFIG_PATH (YAML file) >
    > in-code configuration > default value
    """

    DEFAULT_MAX_RETRIES = 1
    DEFAULT_RETRY_DELAY = 0.1
    DEFAULT_PROBE_TIMEOUT = 5.0
    DEFAULT_COMMAND_TIMEOUT = 10.0

    def __init__(self, **kwds: Dict[str, Any]) -> None:
        self.max_retries = self.DEFAULT_MAX_RETRIES
        self.retry_delay = self.DEFAULT_RETRY_DELAY
        self.probe_timeout = self.DEFAULT_PROBE_TIMEOUT
        self.command_timeout = self.DEFAULT_COMMAND_TIMEOUT

        self.set_discovery_configurations()

        super(DiscoveryOptions, self).__init__(**kwds)

    def set_discovery_configurations(self) -> None:
        in_code = config.get("discovery")
        if not isinstance(in_code, dict):
            in_code = {}
        from_yaml = get_discovery_config_from_yaml()

        self.max_retries = self._resolve(
            "max_retries", "LSFINDER_MAX_RETRIES", parse_positive_int,
            from_yaml, in_code, self.max_retries,
        )
        self.retry_delay = self._resolve(
            "retry_delay", "LSFINDER_RETRY_DELAY", parse_non_negative_float,
            from_yaml, in_code, self.retry_delay,
        )
        self.probe_timeout = self._resolve(
            "probe_timeout", "LSFINDER_PROBE_TIMEOUT", parse_positive_float,
            from_yaml, in_code, self.probe_timeout,
        )
        self.command_timeout = self._resolve(
            "command_timeout", "LSFINDER_COMMAND_TIMEOUT", parse_positive_float,
            from_yaml, in_code, self.command_timeout,
        )

    @staticmethod
    def _resolve(
        key: str,
        env_var: str,
        parse: Callable[[str, Any], Optional[Any]],
        from_yaml: Dict[str, Any],
        in_code: Dict[str, Any],
        default: Any,
    ) -> Any:
        """
        Returns the first usable value for <key>, walking the sources in
        priority order.  Unusable values are warned about and skipped.
        """
        sources = (
            (env_var, os.environ.get(env_var)),
            (f"{key} (config file)", from_yaml.get(key)),
            (f"{key} (in-code config)", in_code.get(key)),
        )
        for name, raw in sources:
            if raw is None:
                continue
            value = parse(name, raw)
            if value is not None:
                return value
        return default
