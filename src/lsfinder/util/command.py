# (c) Copyright IBM Corp. 2025

import subprocess
from typing import List, Optional

from lsfinder.log import logger


def run_command(args: List[str], timeout: Optional[float] = None) -> Optional[str]:
    """
    Runs an external query tool without a shell and returns what it printed.

    Tools such as pgrep and lsof exit with a non-zero status while still
    reporting useful output, so the output is accepted whenever the exit code
    is 0 or stdout is not empty.

    The child is killed and reaped if it outlives <timeout>.

    @param args: the command and its arguments
    @param timeout: seconds to wait for the tool to exit
    @return: the decoded stdout or None when the tool could not deliver any
    """
    logger.debug(f"spawn: {' '.join(args)}")
    try:
        proc = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
            shell=False,
        )
    except subprocess.TimeoutExpired:
        logger.debug(f"run_command: {args[0]} timed out after {timeout}s")
        return None
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug(f"run_command: {args[0]} could not be started ({exc})")
        return None

    stdout = proc.stdout.decode("utf-8", errors="replace")
    if proc.returncode == 0 or stdout:
        return stdout

    stderr = proc.stderr.decode("utf-8", errors="replace").strip()
    logger.debug(
        f"run_command: {args[0]} exited with code {proc.returncode}: {stderr}"
    )
    return None
