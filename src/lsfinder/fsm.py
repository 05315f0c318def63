# (c) Copyright IBM Corp. 2025


import os
import threading
import time
from typing import TYPE_CHECKING, Any, List, Optional

from fysom import Fysom

from lsfinder.log import logger
from lsfinder.util import mask_secret
from lsfinder.util.process_discovery import DiscoveryResult, ProcessInfo

if TYPE_CHECKING:
    from lsfinder.options import DiscoveryOptions
    from lsfinder.platforms.base import BasePlatform
    from lsfinder.probe import EndpointProbe

# Reasons recorded in DiscoveryMachine.last_failure
PROCESS_NOT_FOUND = "process_not_found"
NO_LISTENING_PORTS = "no_listening_ports"
NO_WORKING_PORT = "no_working_port"
DISCOVERY_ERROR = "discovery_error"


class DiscoveryMachine:
    """
    Drives one discovery cycle at a time:

        idle -> searching -> process_found -> ports_found -> connected
                    \\              \\               \\
                     +--------------+---------------+--> retry_or_fail -> failed

    Every step that comes up empty moves to retry_or_fail, from where the
    cycle either starts over at searching or gives up.
    """

    def __init__(
        self,
        platform: "BasePlatform",
        probe: "EndpointProbe",
        options: "DiscoveryOptions",
    ) -> None:
        logger.debug("Initializing discovery state machine")

        self.platform = platform
        self.probe = probe
        self.options = options
        self.last_failure: Optional[str] = None
        self._lock = threading.Lock()

        callbacks = {
            "onmiss": self.on_miss,
            "onconnected": self.on_connected,
            "onfailed": self.on_failed,
        }
        if options.debug:
            callbacks["onchangestate"] = self.log_state_change

        self.fsm = Fysom(
            {
                "initial": "idle",
                "events": [
                    ("lookup", "*", "searching"),
                    ("found", "searching", "process_found"),
                    ("listening", "process_found", "ports_found"),
                    ("connect", "ports_found", "connected"),
                    (
                        "miss",
                        ["searching", "process_found", "ports_found"],
                        "retry_or_fail",
                    ),
                    ("give_up", "retry_or_fail", "failed"),
                    ("reset", "*", "idle"),
                ],
                "callbacks": callbacks,
            }
        )

    @staticmethod
    def log_state_change(e: Any) -> None:
        logger.debug(
            f"({os.getpid()}#{threading.current_thread().name}) FSM event: {e.event}, src: {e.src}, dst: {e.dst}"
        )

    def reset(self) -> None:
        """
        Forgets the outcome of any previous cycle.  Waits for a running cycle
        to finish first.
        """
        with self._lock:
            logger.debug("State machine being reset.  Next detection starts from scratch.")
            self.last_failure = None
            self.fsm.reset()

    def run(self, max_retries: Optional[int] = None) -> Optional[DiscoveryResult]:
        """
        Runs discovery cycles until one yields a validated port or the retry
        budget is spent.  Concurrent callers are serialised.

        @param max_retries: number of attempts, options.max_retries when None
        @return: DiscoveryResult or None when nothing was found
        """
        if max_retries is None:
            max_retries = self.options.max_retries
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got: {max_retries}")

        with self._lock:
            logger.debug(f"Starting process detection (max_retries: {max_retries})")
            self.last_failure = None

            for attempt in range(1, max_retries + 1):
                logger.debug(f"Attempt {attempt}/{max_retries}")
                self.fsm.lookup(attempt=attempt)

                try:
                    result = self.search()
                except Exception:
                    logger.debug(f"Attempt {attempt} failed: ", exc_info=True)
                    result = None
                    if self.fsm.can("miss"):
                        self.fsm.miss(reason=DISCOVERY_ERROR)

                if result is not None:
                    self.last_failure = None
                    self.fsm.connect(result=result)
                    return result

                if attempt < max_retries:
                    time.sleep(self.options.retry_delay)

            self.fsm.give_up(attempts=max_retries)
            return None

    def search(self) -> Optional[DiscoveryResult]:
        """
        One pass through process lookup, port lookup and port validation.
        Fires "miss" on the first step that comes up empty.
        """
        info = self.platform.find_process_info()
        if info is None:
            self.fsm.miss(reason=PROCESS_NOT_FOUND)
            return None
        self.fsm.found(info=info)

        ports = self.platform.get_listening_ports(info.pid)
        logger.debug(
            f"Found {len(ports)} listening port(s) for PID {info.pid}: {ports}"
        )
        if not ports:
            self.fsm.miss(reason=NO_LISTENING_PORTS)
            return None
        self.fsm.listening(ports=ports)

        connect_port = self.find_working_port(ports, info)
        if connect_port is None:
            self.fsm.miss(reason=NO_WORKING_PORT)
            return None

        return DiscoveryResult(
            extension_port=info.extension_port,
            connect_port=connect_port,
            auth_token=info.auth_token,
        )

    def find_working_port(self, ports: List[int], info: ProcessInfo) -> Optional[int]:
        """
        Probes <ports> in ascending order and stops at the first one that answers.
        """
        for port in sorted(ports):
            logger.debug(f"Testing port {port}...")
            if self.probe.is_valid(port, info.auth_token):
                logger.info(f"Port {port} is working")
                return port
        return None

    def on_miss(self, e: Any) -> None:
        self.last_failure = e.reason
        logger.debug(f"Discovery attempt came up empty: {e.reason}")

    def on_connected(self, e: Any) -> None:
        result = e.result
        logger.info(
            f"Language server found. extension_port: {result.extension_port}, "
            f"connect_port: {result.connect_port}, csrf_token: {mask_secret(result.auth_token)}"
        )

    def on_failed(self, e: Any) -> None:
        if self.last_failure == PROCESS_NOT_FOUND:
            logger.info(
                f"Process detection failed after {e.attempts} attempt(s): "
                f"no {self.platform.process_name} process of the host application is running"
            )
        else:
            logger.info(
                f"Process detection failed after {e.attempts} attempt(s): "
                f"language server is running but no working port was found ({self.last_failure})"
            )
