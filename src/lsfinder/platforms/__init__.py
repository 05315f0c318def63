# (c) Copyright IBM Corp. 2025

import platform
from typing import Optional

from lsfinder.log import logger
from lsfinder.options import DiscoveryOptions
from lsfinder.platforms.base import BasePlatform
from lsfinder.platforms.posix import LinuxPlatform, MacOSPlatform, PosixPlatform
from lsfinder.platforms.windows import WindowsPlatform
from lsfinder.util.runtime import is_macos, is_windows


def select_platform(
    system: Optional[str] = None,
    machine: Optional[str] = None,
    options: Optional[DiscoveryOptions] = None,
) -> BasePlatform:
    """
    Picks the platform flavor for the running operating system.

    @param system: value as returned by platform.system(), detected when None
    @param machine: value as returned by platform.machine(), detected when None
    @param options: discovery options handed to the platform
    @return: WindowsPlatform, MacOSPlatform or LinuxPlatform
    """
    if system is None:
        system = platform.system()
    if machine is None:
        machine = platform.machine()

    if is_windows(system):
        flavor = WindowsPlatform
    elif is_macos(system):
        flavor = MacOSPlatform
    else:
        flavor = LinuxPlatform

    logger.debug(f"Selected {flavor.__name__} for {system}/{machine}")
    return flavor(options=options, system=system, machine=machine)


__all__ = [
    "BasePlatform",
    "LinuxPlatform",
    "MacOSPlatform",
    "PosixPlatform",
    "WindowsPlatform",
    "select_platform",
]
