"""Windows detection (install path checks) and launching (direct spawn)."""

from cadbridge.platforms.base import LaunchStep, PlatformStrategy, direct_launch_plan
from cadbridge.platforms.catalog import WINDOWS_CATALOG


class WindowsStrategy(PlatformStrategy):
    name = "windows"
    detection_method = "file_check"
    default_catalog = WINDOWS_CATALOG

    def launch_plan(self, app_path: str, file_path: str) -> list[LaunchStep]:
        return direct_launch_plan(app_path, file_path)
