"""
Platform Layer.

This package holds the static CAD catalogs and one PlatformStrategy per
supported operating system. A strategy is selected once, from the host's
`platform.system()`, and shared by detection and launching.
"""

import logging
import platform

from cadbridge.exceptions import LaunchError
from cadbridge.models.config import BridgeSettings
from cadbridge.models.software import ApplicationDescriptor

from .base import LaunchStep, PlatformStrategy
from .linux import LinuxStrategy
from .macos import MacOSStrategy
from .windows import WindowsStrategy

log = logging.getLogger(__name__)


class UnsupportedPlatformStrategy(PlatformStrategy):
    """Used on hosts without a catalog: nothing is detected and nothing is launched."""

    detection_method = "none"

    def __init__(self, system: str):
        super().__init__(())
        self.name = system or "unknown"

    def is_present(self, descriptor: ApplicationDescriptor) -> bool:
        return False

    def launch_plan(self, app_path: str, file_path: str) -> list[LaunchStep]:
        raise LaunchError(app_path, f"opening files is not supported on '{self.name}'")


def get_platform_strategy(
    settings: BridgeSettings | None = None, system: str | None = None
) -> PlatformStrategy:
    """
    Selects the strategy for the given (or current) operating system.

    Args:
        settings: Supplies the macOS automation marker and launch delay.
        system: Overrides platform.system(), mainly for tests.
    """
    settings = settings or BridgeSettings()
    system = (system if system is not None else platform.system()).lower()

    if system == "windows":
        strategy: PlatformStrategy = WindowsStrategy()
    elif system == "darwin":
        strategy = MacOSStrategy(
            automation_marker=settings.automation_marker,
            launch_delay=settings.launch_delay,
        )
    elif system == "linux":
        strategy = LinuxStrategy()
    else:
        strategy = UnsupportedPlatformStrategy(system)

    log.debug(f"Selected platform strategy: {strategy!r}")
    return strategy


__all__ = [
    "LaunchStep",
    "LinuxStrategy",
    "MacOSStrategy",
    "PlatformStrategy",
    "UnsupportedPlatformStrategy",
    "WindowsStrategy",
    "get_platform_strategy",
]
