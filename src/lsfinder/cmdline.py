# (c) Copyright IBM Corp. 2025

"""
Parsing of the language server command line.

The language server is started by the IDE with its connection secrets on the
command line, e.g.:

    language_server_linux_x64 --enable_lsp --extension_server_port 41837
        --csrf_token 1c4a2b9e-0d3f-4e88-9a71-5b3c2d1e0f6a --app_data_dir antigravity

Flags may appear in any order, as "--flag value" or "--flag=value".
"""

import re
from typing import Optional

from lsfinder.log import logger
from lsfinder.util import mask_secret
from lsfinder.util.process_discovery import ProcessInfo

PORT_FLAG_RE = re.compile(r"--extension_server_port[=\s]+(\d+)")
TOKEN_FLAG_RE = re.compile(r"--csrf_token[=\s]+([a-f0-9][a-f0-9-]*)", re.IGNORECASE)

# Several products ship a binary with the same name.  These markers tell the
# Antigravity language server apart.  Best effort only: an unrelated process
# can carry them and a legitimate one can be started without them.
OWNERSHIP_MARKERS = (
    re.compile(r"--app_data_dir[=\s]+antigravity\b", re.IGNORECASE),
    re.compile(r"[\\/]antigravity[\\/]", re.IGNORECASE),
)


def is_owned_by_host(command_line: str) -> bool:
    """
    Checks whether <command_line> carries one of the ownership markers of the
    host application.

    @param command_line: full command line of a candidate process
    @return: Boolean
    """
    if not command_line:
        return False
    return any(marker.search(command_line) for marker in OWNERSHIP_MARKERS)


def parse_cmdline(pid: int, command_line: str) -> Optional[ProcessInfo]:
    """
    Extracts the extension server port and the CSRF token from a command line.

    A missing port is reported as 0; the listening ports of the process are
    used to connect anyway.  A missing token disqualifies the command line.

    @param pid: process id the command line belongs to
    @param command_line: the full command line
    @return: ProcessInfo or None if no token was found
    """
    token_match = TOKEN_FLAG_RE.search(command_line or "")
    if not token_match or not token_match.group(1):
        logger.debug(f"parse_cmdline: CSRF token not found in command line of PID {pid}")
        return None

    port_match = PORT_FLAG_RE.search(command_line)
    extension_port = int(port_match.group(1)) if port_match else 0

    info = ProcessInfo(
        pid=pid,
        extension_port=extension_port,
        auth_token=token_match.group(1),
    )
    logger.debug(
        f"parse_cmdline: PID {pid}, extension_port: {extension_port}, "
        f"csrf_token: {mask_secret(info.auth_token)}"
    )
    return info
