"""
Downloads drawings over HTTP(S) into the temp directory.
"""

import asyncio
import logging
from pathlib import Path

import aiofiles
import aiohttp

from cadbridge.exceptions import DownloadError, DownloadFailure
from cadbridge.models.config import BridgeSettings
from cadbridge.utils.path import (
    drawing_filename,
    infer_extension_from_url,
    is_remote_url,
    safe_filename,
)

from .auth import prepare_request, split_token

log = logging.getLogger(__name__)

# Longest slice of an error response body kept in the error message
_MAX_ERROR_BODY = 500


class DrawingDownloader:
    """
    Fetches one drawing per call and writes it to the destination directory.

    Every call opens its own session; there is no shared connection pool, no
    retry, and no timeout unless one is configured.
    """

    def __init__(self, settings: BridgeSettings | None = None):
        self._settings = settings or BridgeSettings()

    @property
    def destination_dir(self) -> Path:
        return self._settings.destination_dir

    async def download(
        self, url: str, drawing_id: int | None = None, auth_token: str | None = None
    ) -> Path:
        """
        Downloads a drawing and names it after its id, or generically.

        Args:
            url: The drawing URL, optionally carrying a `token` query parameter.
            drawing_id: Names the file `drawing_<id>.<ext>` when given.
            auth_token: Bearer token that takes precedence over the URL's.

        Returns:
            Absolute path of the written file.

        Raises:
            DownloadError: On transport, HTTP status, empty body or local file failures.
        """
        filename = drawing_filename(drawing_id, infer_extension_from_url(split_token(url)[0]))
        return await self.download_to(url, filename, auth_token=auth_token)

    async def download_to(
        self, url: str, filename: str, auth_token: str | None = None
    ) -> Path:
        """Downloads `url` into the destination directory under `filename`."""
        safe_name = safe_filename(filename)
        if not safe_name:
            raise DownloadError(
                DownloadFailure.FILE_CREATE, f"Invalid file name: '{filename}'"
            )

        request_url, headers = prepare_request(url, auth_token)
        content = await self._fetch(request_url, headers)

        destination = (self.destination_dir / safe_name).absolute()
        await self._write(destination, content)
        log.info(f"Saved drawing to {destination} ({len(content)} bytes)")
        return destination

    async def _fetch(self, url: str, headers: dict[str, str]) -> bytes:
        if not is_remote_url(url):
            raise DownloadError(
                DownloadFailure.TRANSPORT,
                f"Network request failed: not an http(s) URL: '{url}'",
            )

        log.debug(
            f"Downloading {url}"
            + (" with bearer authentication" if "Authorization" in headers else "")
        )
        timeout = aiohttp.ClientTimeout(total=self._settings.request_timeout)
        try:
            async with aiohttp.ClientSession(
                timeout=timeout, headers={"User-Agent": self._settings.user_agent}
            ) as session:
                async with session.get(url, headers=headers, allow_redirects=True) as response:
                    log.debug(f"HTTP response status: {response.status}")
                    if not 200 <= response.status < 300:
                        body = await self._read_error_body(response)
                        raise DownloadError(
                            DownloadFailure.HTTP_STATUS,
                            f"HTTP error: {response.status} {response.reason or ''}".rstrip()
                            + (f" - {body}" if body else ""),
                            status=response.status,
                            body=body,
                        )
                    content = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DownloadError(
                DownloadFailure.TRANSPORT, f"Network request failed: {str(e) or type(e).__name__}"
            ) from e

        log.debug(f"Response body size: {len(content)} bytes")
        if not content:
            raise DownloadError(DownloadFailure.EMPTY_BODY, "Downloaded file is empty")
        return content

    @staticmethod
    async def _read_error_body(response: aiohttp.ClientResponse) -> str:
        """Best-effort read of an error response body."""
        try:
            body = await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.debug(f"Could not read error response body: {e}")
            return ""
        return body.strip()[:_MAX_ERROR_BODY]

    @staticmethod
    async def _write(destination: Path, content: bytes) -> None:
        """
        Writes the payload, replacing any file of the same name.

        Buffered data may only fail to reach the disk when the file is
        closed, so errors from the write and the close both count as write
        failures.
        """
        opened = False
        try:
            async with aiofiles.open(destination, "wb") as f:
                opened = True
                await f.write(content)
        except OSError as e:
            if not opened:
                raise DownloadError(
                    DownloadFailure.FILE_CREATE,
                    f"Failed to create temp file '{destination}': {e}",
                ) from e
            raise DownloadError(
                DownloadFailure.FILE_WRITE, f"Failed to write file '{destination}': {e}"
            ) from e
