# coding=utf-8
# (c) Copyright IBM Corp. 2025
"""
lsfinder

Locates the running Antigravity language server, recovers its CSRF token from
its command line and finds the local port that answers its API.

    import lsfinder

    result = lsfinder.detect()
    if result:
        print(result.connect_port, result.auth_token)
"""

from typing import Optional

from lsfinder.util.process_discovery import DiscoveryResult, ProcessInfo
from lsfinder.version import VERSION

__license__ = "MIT"
__version__ = VERSION


def detect(max_retries: Optional[int] = None) -> Optional[DiscoveryResult]:
    """
    Runs discovery with the process-wide ProcessFinder.

    @param max_retries: number of attempts, the configured default when None
    @return: DiscoveryResult or None when the language server was not found
    """
    from lsfinder.singletons import get_finder

    return get_finder().detect(max_retries)


def reconnect(max_retries: Optional[int] = None) -> Optional[DiscoveryResult]:
    """
    Discards any previous result and runs a complete discovery again.
    """
    from lsfinder.singletons import get_finder

    return get_finder().reconnect(max_retries)


__all__ = ["DiscoveryResult", "ProcessInfo", "VERSION", "detect", "reconnect"]
