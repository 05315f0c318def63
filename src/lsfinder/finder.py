# (c) Copyright IBM Corp. 2025

"""
The ProcessFinder locates the running language server and hands out a
validated endpoint: the port that answers its API and the CSRF token to
authenticate with.
"""

import logging
from typing import Optional

from lsfinder.fsm import DiscoveryMachine
from lsfinder.log import logger
from lsfinder.options import DiscoveryOptions
from lsfinder.platforms import BasePlatform, select_platform
from lsfinder.probe import EndpointProbe
from lsfinder.util import mask_secret
from lsfinder.util.process_discovery import DiscoveryResult
from lsfinder.util.runtime import log_runtime_env_info
from lsfinder.version import VERSION


class ProcessFinder(object):
    """
    The ProcessFinder is the entry point for callers.  Every call to detect()
    or reconnect() starts from zero knowledge: nothing discovered earlier is
    reused, since the port and token change whenever the language server restarts.
    """

    def __init__(
        self,
        options: Optional[DiscoveryOptions] = None,
        platform: Optional[BasePlatform] = None,
        probe: Optional[EndpointProbe] = None,
    ) -> None:
        self.options = options if options is not None else DiscoveryOptions()

        # Update log level from what Options detected
        self.update_log_level()

        logger.debug(f"Initializing ProcessFinder version: {VERSION}")
        log_runtime_env_info()

        self.platform = (
            platform if platform is not None else select_platform(options=self.options)
        )
        self.probe = probe if probe is not None else EndpointProbe(self.options)
        self.machine = DiscoveryMachine(self.platform, self.probe, self.options)
        self.last_result: Optional[DiscoveryResult] = None

        logger.info(f"Target process name: {self.platform.process_name}")

    @property
    def last_failure(self) -> Optional[str]:
        """Why the last detection came up empty, None after a success."""
        return self.machine.last_failure

    def update_log_level(self) -> None:
        """Uses the value in <self.options.log_level> to update the package logger"""
        if self.options is None or self.options.log_level not in [
            logging.DEBUG,
            logging.INFO,
            logging.WARN,
            logging.ERROR,
        ]:
            logger.warning("ProcessFinder.update_log_level: Unknown log level set")
            return

        logger.setLevel(self.options.log_level)

    def detect(self, max_retries: Optional[int] = None) -> Optional[DiscoveryResult]:
        """
        Runs discovery until a port answers or <max_retries> attempts are spent.

        @param max_retries: number of attempts, options.max_retries when None
        @return: DiscoveryResult or None when the language server was not found
        """
        self.last_result = self.machine.run(max_retries)
        return self.last_result

    def reconnect(self, max_retries: Optional[int] = None) -> Optional[DiscoveryResult]:
        """
        Drops whatever was found before and runs a complete discovery again.
        """
        logger.info("Reconnect triggered")
        self.last_result = None
        self.machine.reset()
        return self.detect(max_retries)

    def diagnostics(self) -> None:
        """
        Helper function to dump out state.
        """
        try:
            logger.warning("====> lsfinder Diagnostics <====")

            logger.warning("----> Platform <----")
            logger.warning(f"Platform: {self.platform.name}")
            logger.warning(f"Process name: {self.platform.process_name}")

            logger.warning("----> Options <----")
            logger.warning(f"Options: {self.options.__dict__}")

            logger.warning("----> StateMachine <----")
            logger.warning(f"State: {self.machine.fsm.current}")
            logger.warning(f"last_failure: {self.last_failure}")

            if self.last_result is not None:
                logger.warning(
                    f"last_result: extension_port: {self.last_result.extension_port}, "
                    f"connect_port: {self.last_result.connect_port}, "
                    f"csrf_token: {mask_secret(self.last_result.auth_token)}"
                )
            else:
                logger.warning("last_result: None")
        except Exception:
            logger.warning("Non-fatal diagnostics exception: ", exc_info=True)
