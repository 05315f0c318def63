# (c) Copyright IBM Corp. 2025

import platform
from typing import Optional, Tuple

from lsfinder.log import logger

ARM_MACHINES = ("arm64", "aarch64")


def get_runtime_env_info() -> Tuple[str, str, str]:
    """
    Returns information about the current runtime environment.

    Returns:
        Tuple[str, str, str]: A tuple containing:
            - Operating system name (e.g., 'Linux', 'Darwin', 'Windows')
            - Machine type (e.g., 'x86_64', 'arm64')
            - Python version string
    """
    system = platform.system()
    machine = platform.machine()
    python_version = platform.python_version()

    return system, machine, python_version


def log_runtime_env_info() -> None:
    """
    Logs debug information about the current runtime environment.
    """
    system, machine, python_version = get_runtime_env_info()
    logger.debug(
        f"Runtime environment: OS: {system}, Machine: {machine}, Python version: {python_version}"
    )


def is_windows(system: Optional[str] = None) -> bool:
    if system is None:
        system = platform.system()
    return system == "Windows"


def is_macos(system: Optional[str] = None) -> bool:
    if system is None:
        system = platform.system()
    return system == "Darwin"


def is_arm(machine: Optional[str] = None) -> bool:
    if machine is None:
        machine = platform.machine()
    return machine.lower() in ARM_MACHINES


def get_language_server_name(
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> str:
    """
    Determines the executable name of the language server binary shipped for
    the given operating system and CPU architecture.

    Windows only ships an x64 build.  Any POSIX system that is not macOS is
    treated as Linux.

    @param system: value as returned by platform.system(), detected when None
    @param machine: value as returned by platform.machine(), detected when None
    @return: the executable name, e.g. "language_server_linux_x64"
    """
    if system is None:
        system = platform.system()
    if machine is None:
        machine = platform.machine()

    if is_windows(system):
        return "language_server_windows_x64.exe"
    if is_macos(system):
        return "language_server_macos_arm" if is_arm(machine) else "language_server_macos"
    return "language_server_linux_arm" if is_arm(machine) else "language_server_linux_x64"
