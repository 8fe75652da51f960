"""Linux detection (PATH lookups) and launching (direct spawn)."""

import logging
import shutil

from cadbridge.models.software import ApplicationDescriptor
from cadbridge.platforms.base import LaunchStep, PlatformStrategy, direct_launch_plan
from cadbridge.platforms.catalog import LINUX_CATALOG

log = logging.getLogger(__name__)


class LinuxStrategy(PlatformStrategy):
    name = "linux"
    detection_method = "command_line"
    default_catalog = LINUX_CATALOG

    def is_present(self, descriptor: ApplicationDescriptor) -> bool:
        """A command is present when it resolves on the executable search path."""
        resolved = shutil.which(descriptor.exec_path)
        if resolved:
            log.debug(f"'{descriptor.exec_path}' resolved to {resolved}")
        return resolved is not None

    def launch_plan(self, app_path: str, file_path: str) -> list[LaunchStep]:
        return direct_launch_plan(app_path, file_path)
