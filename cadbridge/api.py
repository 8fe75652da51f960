"""
The public entry points used by the desktop front-end.

`CadBridge` selects the platform strategy once and exposes detection,
opening, downloading and platform info as plain method calls that return
structured results.
"""

import logging
from typing import Any

from cadbridge.config_manager import ConfigManager
from cadbridge.core.detector import SoftwareDetector
from cadbridge.core.launcher import Launcher
from cadbridge.core.opener import CadFileOpener
from cadbridge.exceptions import DownloadError
from cadbridge.models.config import BridgeSettings
from cadbridge.models.software import DetectionReport, DownloadOutcome, LaunchOutcome
from cadbridge.platforms import PlatformStrategy, get_platform_strategy
from cadbridge.utils.system_info import get_system_info
from cadbridge.web.downloader import DrawingDownloader

log = logging.getLogger(__name__)


class CadBridge:
    """Facade over detection, download and launch for one host."""

    def __init__(
        self,
        settings: BridgeSettings | None = None,
        strategy: PlatformStrategy | None = None,
        launcher: Launcher | None = None,
        downloader: DrawingDownloader | None = None,
    ):
        """
        Initializes the bridge.

        Args:
            settings: Validated settings; defaults apply when omitted.
            strategy: Platform behavior; selected from the host when omitted.
            launcher: Process launcher; built on the strategy when omitted.
            downloader: Drawing downloader; built from the settings when omitted.
        """
        self.settings = settings or BridgeSettings()
        self.strategy = strategy or get_platform_strategy(self.settings)
        self.detector = SoftwareDetector(self.strategy)
        self.launcher = launcher or Launcher(self.strategy)
        self.downloader = downloader or DrawingDownloader(self.settings)
        self._opener = CadFileOpener(self.detector, self.launcher, self.downloader)

    @classmethod
    def from_environment(cls, cli_options: dict[str, Any] | None = None) -> "CadBridge":
        """Builds a bridge from CADBRIDGE_* variables and optional overrides."""
        return cls(ConfigManager().load_config(cli_options))

    def detect_cad_software(self) -> DetectionReport:
        return self.detector.detect()

    async def open_cad_file(
        self, file_path: str, drawing_id: int | None = None
    ) -> LaunchOutcome:
        return await self._opener.open_file(file_path, drawing_id)

    async def open_cad_file_with_path(self, file_path: str, cad_path: str) -> LaunchOutcome:
        return await self._opener.open_file_with_path(file_path, cad_path)

    def detect_cad_applications(self) -> str:
        """Returns the path of the first detected application, or an empty string."""
        for software in self.detect_cad_software().software:
            if software.detected:
                return software.exec_path
        return ""

    def get_available_cad_applications(self) -> list[str]:
        """Returns 'name (path)' for every detected application."""
        return [
            software.display_name
            for software in self.detect_cad_software().software
            if software.detected
        ]

    async def download_and_save_drawing(
        self, drawing_url: str, filename: str, auth_token: str | None = None
    ) -> DownloadOutcome:
        """Downloads a drawing into the temp directory under the given name."""
        try:
            path = await self.downloader.download_to(
                drawing_url, filename, auth_token=auth_token
            )
        except DownloadError as e:
            log.error(f"[red]Download failed: {e}[/red]")
            return DownloadOutcome(success=False, message="Download failed", error=str(e))
        return DownloadOutcome(success=True, path=str(path), message="Drawing saved")

    def get_system_info(self) -> dict[str, str]:
        return get_system_info()
