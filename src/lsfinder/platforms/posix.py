# (c) Copyright IBM Corp. 2025

"""
Process and port discovery on Linux and macOS, using pgrep and lsof.
"""
import re
import shutil
from typing import List, Tuple

from lsfinder.log import logger
from lsfinder.platforms.base import BasePlatform

WHITESPACE_RE = re.compile(r"\s+")


class PosixPlatform(BasePlatform):
    name = "posix"

    # pgrep flags printing the pid followed by the full command line
    PGREP_FLAGS = "-af"

    def list_processes(self) -> List[Tuple[int, str]]:
        stdout = self.run(["pgrep", self.PGREP_FLAGS, self.process_name])
        if stdout is None:
            return []
        return self.parse_pgrep_output(stdout)

    @staticmethod
    def parse_pgrep_output(output: str) -> List[Tuple[int, str]]:
        """
        Splits pgrep output lines at the first whitespace run into
        (pid, rest of line).  Lines not starting with a pid are skipped.
        """
        processes = []
        for line in output.splitlines():
            parts = WHITESPACE_RE.split(line.strip(), maxsplit=1)
            if not parts[0].isdigit():
                continue
            command_line = parts[1] if len(parts) > 1 else ""
            processes.append((int(parts[0]), command_line))
        return processes

    def get_listening_ports(self, pid: int) -> List[int]:
        if shutil.which("lsof") is None:
            logger.debug("lsof not available, cannot list listening ports")
            return []

        stdout = self.run(
            ["lsof", "-nP", "-a", "-iTCP", "-sTCP:LISTEN", "-p", str(int(pid))]
        )
        if stdout is None:
            return []
        return self.parse_lsof_output(stdout, pid)

    @staticmethod
    def parse_lsof_output(output: str, pid: int) -> List[int]:
        """
        Extracts the local ports of the LISTEN sockets of <pid> from lsof output,
        e.g.:

            language_ 4242 user 12u IPv4 0x1 0t0 TCP 127.0.0.1:42100 (LISTEN)
            language_ 4242 user 13u IPv6 0x2 0t0 TCP [::1]:42101 (LISTEN)
        """
        regex = re.compile(
            rf"^\S+\s+{int(pid)}\s+.*?(?:TCP|UDP)\s+(?:\*|[\d.]+|\[[^\]]+\]):(\d+)\s+\(LISTEN\)",
            re.IGNORECASE | re.MULTILINE,
        )
        return BasePlatform.normalize_ports(
            int(match.group(1)) for match in regex.finditer(output)
        )


class LinuxPlatform(PosixPlatform):
    name = "linux"
    PGREP_FLAGS = "-af"


class MacOSPlatform(PosixPlatform):
    name = "macos"
    PGREP_FLAGS = "-fl"
