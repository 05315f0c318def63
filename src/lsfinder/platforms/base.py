# (c) Copyright IBM Corp. 2025

"""
Base class for all the platform flavors
"""
import abc
from typing import Iterable, List, Optional, Tuple

from lsfinder.cmdline import is_owned_by_host, parse_cmdline
from lsfinder.log import logger
from lsfinder.options import DiscoveryOptions
from lsfinder.util.command import run_command
from lsfinder.util.process_discovery import ProcessInfo
from lsfinder.util.runtime import get_language_server_name


class BasePlatform(abc.ABC):
    """
    Base class for all platform flavors.

    A platform knows how to list the running language server processes with
    their command lines and how to list the TCP ports a process listens on.
    Neither operation raises: a missing tool or an unexpected output simply
    yields an empty list.
    """

    name = "base"

    def __init__(
        self,
        options: Optional[DiscoveryOptions] = None,
        system: Optional[str] = None,
        machine: Optional[str] = None,
    ) -> None:
        self.options = options if options is not None else DiscoveryOptions()
        self.process_name = get_language_server_name(system, machine)
        logger.debug(f"{self.name} platform: target process name: {self.process_name}")

    @abc.abstractmethod
    def list_processes(self) -> List[Tuple[int, str]]:
        """
        Lists every running instance of <self.process_name>.

        @return: list of (pid, command line) pairs
        """
        pass

    @abc.abstractmethod
    def get_listening_ports(self, pid: int) -> List[int]:
        """
        Lists the TCP ports <pid> holds in LISTEN state.

        @return: ports sorted ascending, without duplicates
        """
        pass

    def find_processes(self) -> List[Tuple[int, str]]:
        """
        Lists the running language server processes that belong to the host
        application, dropping same-named processes of other products.
        """
        processes = []
        for pid, command_line in self.list_processes():
            if is_owned_by_host(command_line):
                processes.append((pid, command_line))
            else:
                logger.debug(f"Ignoring PID {pid}: not owned by the host application")

        if not processes:
            logger.debug(f"No {self.process_name} process of the host application found")
        return processes

    def find_process_info(self) -> Optional[ProcessInfo]:
        """
        Returns the connection details of the first host language server whose
        command line carries a CSRF token.
        """
        for pid, command_line in self.find_processes():
            info = parse_cmdline(pid, command_line)
            if info is not None:
                return info
        return None

    def run(self, args: List[str]) -> Optional[str]:
        return run_command(args, timeout=self.options.command_timeout)

    @staticmethod
    def normalize_ports(ports: Iterable[int]) -> List[int]:
        return sorted(set(ports))
