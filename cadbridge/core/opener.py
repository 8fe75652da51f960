"""
Ties detection, downloading and launching together for one open request.
"""

import asyncio
import logging
from pathlib import Path

from cadbridge.exceptions import DownloadError, LaunchError
from cadbridge.models.software import LaunchOutcome
from cadbridge.utils.path import file_extension, is_remote_url
from cadbridge.web.auth import split_token
from cadbridge.web.downloader import DrawingDownloader

from .detector import SoftwareDetector
from .launcher import Launcher

log = logging.getLogger(__name__)


class CadFileOpener:
    """
    Resolves a path or URL to a local file and opens it with a CAD application.

    Every error of the download and launch stages comes back as a failed
    LaunchOutcome rather than an exception.
    """

    def __init__(
        self,
        detector: SoftwareDetector,
        launcher: Launcher,
        downloader: DrawingDownloader,
    ):
        self._detector = detector
        self._launcher = launcher
        self._downloader = downloader

    async def open_file(
        self, file_path: str, drawing_id: int | None = None
    ) -> LaunchOutcome:
        """
        Opens a drawing with the first detected application that supports its
        extension, in catalog order.
        """
        log.info(f"Opening CAD file: {split_token(file_path)[0]}")
        try:
            local_path = await self._resolve_local_path(file_path, drawing_id)
        except DownloadError as e:
            log.error(f"[red]Download failed: {e}[/red]")
            return LaunchOutcome(success=False, message="Download failed", error=str(e))

        extension = file_extension(local_path)
        report = await asyncio.to_thread(self._detector.detect)
        compatible = [
            software
            for software in report.software
            if software.detected and software.supports(extension)
        ]

        if not compatible:
            shown = extension or "extension-less"
            log.warning(f"No detected CAD application supports {shown} files.")
            return LaunchOutcome(
                success=False,
                message=f"No CAD software found that supports {shown} files",
                error="No compatible CAD software found",
            )

        software = compatible[0]
        log.info(f"Selected {software.name} for {extension} files.")
        try:
            await asyncio.to_thread(self._launcher.launch, local_path, software)
        except LaunchError as e:
            return LaunchOutcome(
                success=False,
                software=software.name,
                message=f"Failed to open file with {software.name}",
                error=str(e),
            )

        return LaunchOutcome(
            success=True,
            software=software.name,
            message=f"File opened with {software.name}",
        )

    async def open_file_with_path(self, file_path: str, cad_path: str) -> LaunchOutcome:
        """
        Downloads a drawing and opens it with an application chosen by the caller.

        The input always goes through the downloader, so a local path comes
        back as a failed download. Detection and the extension compatibility
        check are skipped; the caller's choice is trusted as-is.
        """
        log.info(f"Opening CAD file with {cad_path}: {split_token(file_path)[0]}")
        try:
            local_path = await self._downloader.download(file_path)
        except DownloadError as e:
            log.error(f"[red]Download failed: {e}[/red]")
            return LaunchOutcome(
                success=False, message=f"Download failed: {e}", error=str(e)
            )

        try:
            await asyncio.to_thread(self._launcher.launch, local_path, cad_path)
        except LaunchError as e:
            return LaunchOutcome(
                success=False,
                software=cad_path,
                message=f"Failed to open CAD file: {e}",
                error=str(e),
            )

        return LaunchOutcome(success=True, software=cad_path, message="CAD file opened")

    async def _resolve_local_path(self, file_path: str, drawing_id: int | None) -> Path:
        if is_remote_url(file_path):
            return await self._downloader.download(file_path, drawing_id=drawing_id)
        return Path(file_path)
