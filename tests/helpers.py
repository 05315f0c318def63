# (c) Copyright IBM Corp. 2025

from typing import Dict, List, Optional, Tuple

from lsfinder.options import DiscoveryOptions
from lsfinder.platforms.base import BasePlatform

TEST_TOKEN = "abcd1234-ef00"

TEST_CMDLINE = (
    "/usr/share/antigravity/resources/app/extensions/antigravity/bin/language_server_linux_x64 "
    "--enable_lsp --extension_server_port=51111 --csrf_token=abcd1234-ef00 "
    "--app_data_dir antigravity"
)


class FakePlatform(BasePlatform):
    """
    Platform with canned process and port listings that records every call.
    """

    name = "fake"

    def __init__(
        self,
        processes: Optional[List[Tuple[int, str]]] = None,
        ports: Optional[Dict[int, List[int]]] = None,
        options: Optional[DiscoveryOptions] = None,
    ) -> None:
        super(FakePlatform, self).__init__(options=options, system="Linux", machine="x86_64")
        self.processes = processes if processes is not None else []
        self.ports = ports if ports is not None else {}
        self.list_processes_calls = 0
        self.port_queries: List[int] = []

    def list_processes(self) -> List[Tuple[int, str]]:
        self.list_processes_calls += 1
        return list(self.processes)

    def get_listening_ports(self, pid: int) -> List[int]:
        self.port_queries.append(pid)
        return self.normalize_ports(self.ports.get(pid, []))


class FakeProbe(object):
    """
    Probe answering positively for a fixed set of ports.
    """

    def __init__(self, valid_ports: Optional[List[int]] = None) -> None:
        self.valid_ports = set(valid_ports or [])
        self.probed: List[Tuple[int, str]] = []

    def is_valid(self, port: int, auth_token: str) -> bool:
        self.probed.append((port, auth_token))
        return port in self.valid_ports
