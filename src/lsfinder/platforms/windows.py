# (c) Copyright IBM Corp. 2025

"""
Process and port discovery on Windows, using PowerShell CIM and NetTCPIP cmdlets.
"""
import json
from typing import Any, List, Optional, Tuple

from lsfinder.log import logger
from lsfinder.platforms.base import BasePlatform

# Absolute paths avoid depending on PATH or the current drive.
WIN_SYS32 = "C:\\Windows\\System32"
WIN_POWERSHELL = f"{WIN_SYS32}\\WindowsPowerShell\\v1.0\\powershell.exe"


class WindowsPlatform(BasePlatform):
    name = "windows"

    def list_processes(self) -> List[Tuple[int, str]]:
        ps_command = (
            f"Get-CimInstance Win32_Process -Filter \"name='{self.process_name}'\" "
            "| Select-Object ProcessId,CommandLine | ConvertTo-Json"
        )
        data = self._powershell_json(ps_command)
        if data is None:
            return []

        if not isinstance(data, list):
            data = [data]

        processes = []
        for item in data:
            if not isinstance(item, dict):
                continue
            pid = item.get("ProcessId")
            if not isinstance(pid, int) or isinstance(pid, bool):
                logger.debug(f"Skipping process entry without a usable ProcessId: {item}")
                continue
            processes.append((pid, item.get("CommandLine") or ""))
        return processes

    def get_listening_ports(self, pid: int) -> List[int]:
        ps_command = (
            f"Get-NetTCPConnection -OwningProcess {int(pid)} -State Listen "
            "-ErrorAction SilentlyContinue | Select-Object -ExpandProperty LocalPort "
            "| ConvertTo-Json"
        )
        data = self._powershell_json(ps_command)
        if data is None:
            return []

        if not isinstance(data, list):
            data = [data]

        return self.normalize_ports(
            port for port in data if isinstance(port, int) and not isinstance(port, bool)
        )

    def _powershell_json(self, ps_command: str) -> Optional[Any]:
        """
        Runs <ps_command> and decodes its JSON output.

        @return: the decoded value or None on empty or undecodable output
        """
        stdout = self.run([WIN_POWERSHELL, "-NoProfile", "-Command", ps_command])
        if stdout is None or not stdout.strip():
            logger.debug("PowerShell returned empty output")
            return None

        try:
            return json.loads(stdout.strip())
        except json.JSONDecodeError:
            logger.debug(f"PowerShell output is not JSON: ({stdout.strip()})")
            return None
