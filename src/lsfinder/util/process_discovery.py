# (c) Copyright IBM Corp. 2025

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ProcessInfo:
    pid: int  # the PID of the language server process
    extension_port: int  # value of --extension_server_port, 0 when absent
    auth_token: str  # value of --csrf_token, never empty


@dataclass(frozen=True)
class DiscoveryResult:
    extension_port: int  # taken from the ProcessInfo
    connect_port: int  # the listening port that answered the probe
    auth_token: str  # taken from the ProcessInfo

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
