"""Tests for the Typer command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

import cadbridge.__main__ as cadbridge_main
import cadbridge.cli.app as cli_app
from cadbridge import __version__
from cadbridge.api import CadBridge
from cadbridge.core.launcher import Launcher
from cadbridge.exceptions import DownloadError, DownloadFailure, LaunchError
from cadbridge.models.config import BridgeSettings
from cadbridge.utils.path import drawing_filename

from conftest import AUTOCAD, LIBRECAD, FakeStrategy, RecordingSpawner

runner = CliRunner()


class StubDownloader:
    """Writes a fixed payload instead of fetching."""

    def __init__(self, directory: Path, error: DownloadError | None = None):
        self.directory = directory
        self.error = error
        self.calls: list[tuple[str, str, str | None]] = []

    async def download(self, url, drawing_id=None, auth_token=None) -> Path:
        return await self.download_to(url, drawing_filename(drawing_id, "dxf"), auth_token)

    async def download_to(self, url, filename, auth_token=None) -> Path:
        self.calls.append((url, filename, auth_token))
        if self.error:
            raise self.error
        path = self.directory / filename
        path.write_bytes(b"0\nEOF\n")
        return path


@pytest.fixture
def bridge_parts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Routes every CLI command to a bridge built on fakes."""
    spawner = RecordingSpawner()
    strategy = FakeStrategy([AUTOCAD, LIBRECAD], present={"/opt/librecad"})
    downloader = StubDownloader(tmp_path)
    bridge = CadBridge(
        BridgeSettings(download_dir=str(tmp_path)),
        strategy=strategy,
        launcher=Launcher(strategy, spawner=spawner, sleep=lambda seconds: None),
        downloader=downloader,
    )
    monkeypatch.setattr(cli_app, "_build_bridge", lambda ctx: bridge)
    return bridge, spawner, downloader


class TestGlobalOptions:
    def test_version(self) -> None:
        result = runner.invoke(cli_app.app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_setting_exits_with_error(self) -> None:
        result = runner.invoke(cli_app.app, ["--launch-delay", "120", "detect"])

        assert result.exit_code == 1
        assert "ConfigurationError" in result.output

    def test_invalid_environment_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CADBRIDGE_REQUEST_TIMEOUT", "-1")

        result = runner.invoke(cli_app.app, ["info"])

        assert result.exit_code == 1
        assert "ConfigurationError" in result.output


class TestDetectCommands:
    def test_detect_lists_software(self, bridge_parts) -> None:
        result = runner.invoke(cli_app.app, ["detect"])

        assert result.exit_code == 0
        assert "LibreCAD" in result.output
        assert "AutoCAD" not in result.output

    def test_apps_lists_name_and_path(self, bridge_parts) -> None:
        result = runner.invoke(cli_app.app, ["apps"])

        assert result.exit_code == 0
        assert result.output.strip() == "LibreCAD (/opt/librecad)"

    def test_apps_first(self, bridge_parts) -> None:
        result = runner.invoke(cli_app.app, ["apps", "--first"])

        assert result.exit_code == 0
        assert result.output.strip() == "/opt/librecad"

    def test_apps_first_without_software(self, monkeypatch: pytest.MonkeyPatch) -> None:
        strategy = FakeStrategy([AUTOCAD])
        bridge = CadBridge(BridgeSettings(), strategy=strategy)
        monkeypatch.setattr(cli_app, "_build_bridge", lambda ctx: bridge)

        result = runner.invoke(cli_app.app, ["apps", "--first"])

        assert result.exit_code == 1
        assert "No CAD software detected" in result.output

    def test_info(self) -> None:
        result = runner.invoke(cli_app.app, ["info"])

        assert result.exit_code == 0
        assert "os:" in result.output
        assert "arch:" in result.output


class TestOpenCommand:
    def test_open_local_file(self, bridge_parts) -> None:
        _, spawner, _ = bridge_parts

        result = runner.invoke(cli_app.app, ["open", "/tmp/plan.dxf"])

        assert result.exit_code == 0
        assert "File opened with LibreCAD" in result.output
        assert spawner.commands == [("/opt/librecad", str(Path("/tmp/plan.dxf")))]

    def test_open_unsupported_extension_fails(self, bridge_parts) -> None:
        result = runner.invoke(cli_app.app, ["open", "/tmp/plan.dwg"])

        assert result.exit_code == 1
        assert "No CAD software found" in result.output

    def test_open_url_downloads_first(self, bridge_parts, tmp_path: Path) -> None:
        _, spawner, downloader = bridge_parts

        result = runner.invoke(
            cli_app.app, ["open", "https://example.com/drawings/4", "--drawing-id", "4"]
        )

        assert result.exit_code == 0
        assert downloader.calls[0][1] == "drawing_4.dxf"
        assert spawner.commands == [("/opt/librecad", str(tmp_path / "drawing_4.dxf"))]

    def test_open_with_explicit_application(self, bridge_parts, tmp_path: Path) -> None:
        _, spawner, _ = bridge_parts

        result = runner.invoke(
            cli_app.app, ["open", "https://example.com/a.step", "--with", "/opt/freecad"]
        )

        assert result.exit_code == 0
        assert "CAD file opened" in result.output
        assert spawner.commands == [("/opt/freecad", str(tmp_path / "temp_drawing.dxf"))]


class TestDownloadCommand:
    def test_default_filename_from_url(self, bridge_parts, tmp_path: Path) -> None:
        _, _, downloader = bridge_parts

        result = runner.invoke(
            cli_app.app, ["download", "https://example.com/files/part.dwg", "--token", "abc"]
        )

        assert result.exit_code == 0
        assert downloader.calls == [("https://example.com/files/part.dwg", "temp_drawing.dwg", "abc")]
        assert "Drawing saved" in result.output

    def test_explicit_filename(self, bridge_parts) -> None:
        _, _, downloader = bridge_parts

        result = runner.invoke(
            cli_app.app, ["download", "https://example.com/x", "--filename", "mine.dxf"]
        )

        assert result.exit_code == 0
        assert downloader.calls[0][1] == "mine.dxf"

    def test_failure_exits_nonzero(self, bridge_parts) -> None:
        _, _, downloader = bridge_parts
        downloader.error = DownloadError(DownloadFailure.EMPTY_BODY, "Downloaded file is empty")

        result = runner.invoke(cli_app.app, ["download", "https://example.com/x"])

        assert result.exit_code == 1
        assert "Downloaded file is empty" in result.output


class TestEntryPoint:
    def test_escaped_error_becomes_panel_and_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        def failing_app() -> None:
            raise LaunchError("/opt/acad", "permission denied")

        monkeypatch.setattr(cadbridge_main, "app", failing_app)

        with pytest.raises(SystemExit) as exc_info:
            cadbridge_main.main()

        assert exc_info.value.code == 1
        assert "LaunchError" in capsys.readouterr().out

    def test_interrupt_exits_quietly(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        def interrupted_app() -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(cadbridge_main, "app", interrupted_app)

        with pytest.raises(SystemExit) as exc_info:
            cadbridge_main.main()

        assert exc_info.value.code == 130
        assert "Cancelled" in capsys.readouterr().out
