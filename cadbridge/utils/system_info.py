"""
Platform identifiers reported to clients that branch on the host platform.
"""

import os
import platform

# platform.system() lowercased -> reported OS name
_OS_NAMES = {
    "darwin": "macos",
    "windows": "windows",
    "linux": "linux",
}

# Normalized to the names used by the desktop client
_ARCH_MAP = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}


def os_name() -> str:
    system = platform.system().lower()
    return _OS_NAMES.get(system, system)


def arch_name() -> str:
    machine = platform.machine().lower()
    return _ARCH_MAP.get(machine, machine)


def os_family() -> str:
    return "windows" if os.name == "nt" else "unix"


def get_system_info() -> dict[str, str]:
    """
    Returns OS name, architecture, family and, when resolvable, the current user.

    Example:
        {"os": "macos", "arch": "aarch64", "family": "unix", "user": "alice"}
    """
    info = {"os": os_name(), "arch": arch_name(), "family": os_family()}

    user = os.environ.get("USER") or os.environ.get("USERNAME")
    if user:
        info["user"] = user
    return info
