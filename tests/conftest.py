"""Shared fixtures and fakes for the cadbridge test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from cadbridge.exceptions import DownloadError
from cadbridge.models.config import BridgeSettings
from cadbridge.models.software import ApplicationDescriptor
from cadbridge.platforms.base import LaunchStep, PlatformStrategy, direct_launch_plan
from cadbridge.platforms.catalog import CatalogEntry


class FakeStrategy(PlatformStrategy):
    """Strategy whose presence checks come from a fixed set of paths."""

    name = "fake"
    detection_method = "file_check"

    def __init__(self, catalog: Iterable[CatalogEntry], present: Iterable[str] = ()):
        super().__init__(catalog)
        self.present = set(present)
        self.checked: list[str] = []

    def is_present(self, descriptor: ApplicationDescriptor) -> bool:
        self.checked.append(descriptor.exec_path)
        return descriptor.exec_path in self.present

    def launch_plan(self, app_path: str, file_path: str) -> list[LaunchStep]:
        return direct_launch_plan(app_path, file_path)


class RecordingSpawner:
    """Records spawned commands and fails the ones matching `fail_when`."""

    def __init__(self, fail_when: Callable[[tuple[str, ...]], bool] | None = None):
        self.commands: list[tuple[str, ...]] = []
        self._fail_when = fail_when or (lambda command: False)

    def __call__(self, command: Sequence[str]) -> object:
        command = tuple(command)
        self.commands.append(command)
        if self._fail_when(command):
            raise FileNotFoundError(2, "No such file or directory", command[0])
        return object()


class FakeDownloader:
    """Stands in for DrawingDownloader in orchestration tests."""

    def __init__(self, result: Path | None = None, error: DownloadError | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, int | None]] = []

    async def download(self, url, drawing_id=None, auth_token=None) -> Path:
        self.calls.append((url, drawing_id))
        if self.error:
            raise self.error
        return self.result


@asynccontextmanager
async def serve(handler):
    """Runs an aiohttp test server that answers every GET with `handler`."""

    async def dispatch(request: web.Request) -> web.StreamResponse:
        return await handler(request)

    app = web.Application()
    app.router.add_get("/{tail:.*}", dispatch)
    async with TestServer(app) as server:
        yield server


LIBRECAD = CatalogEntry("LibreCAD", "/opt/librecad", (".dxf",), "librecad")
FREECAD = CatalogEntry("FreeCAD", "/opt/freecad", (".fcstd", ".step"), "freecad")
AUTOCAD = CatalogEntry("AutoCAD 2024", "/opt/acad", (".dwg", ".dxf"), "autocad")


@pytest.fixture
def settings(tmp_path: Path) -> BridgeSettings:
    """Settings that download into a temporary directory and never pause."""
    return BridgeSettings(download_dir=str(tmp_path), launch_delay=0.0)


@pytest.fixture
def spawner() -> RecordingSpawner:
    return RecordingSpawner()
