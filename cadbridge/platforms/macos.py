"""
macOS detection (application bundle checks) and launching.

Bundles are opened through `open -a`. Bundles whose name carries the
automation marker (AutoCAD by default) ignore the file argument of `open -a`
when they are cold-started, so they get a longer chain: start the bundle,
wait, then ask the running application to open the file through AppleScript.
"""

from pathlib import Path, PurePosixPath

from cadbridge.models.config import DEFAULT_AUTOMATION_MARKER, DEFAULT_LAUNCH_DELAY
from cadbridge.platforms.base import LaunchStep, PlatformStrategy, direct_launch_plan
from cadbridge.platforms.catalog import MACOS_CATALOG

APP_BUNDLE_SUFFIX = ".app"


def is_app_bundle(path: str) -> bool:
    return path.rstrip("/").lower().endswith(APP_BUNDLE_SUFFIX)


def bundle_app_name(bundle_path: str) -> str:
    """Application name as AppleScript knows it: the bundle's file stem."""
    return PurePosixPath(bundle_path.rstrip("/")).stem


def applescript_string(value: str) -> str:
    """Quotes a value as an AppleScript string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def open_file_script(app_name: str, file_path: str) -> str:
    return (
        f"tell application {applescript_string(app_name)}\n"
        "    activate\n"
        f"    open POSIX file {applescript_string(file_path)}\n"
        "end tell"
    )


class MacOSStrategy(PlatformStrategy):
    name = "macos"
    detection_method = "application_bundle"
    default_catalog = MACOS_CATALOG

    def __init__(
        self,
        catalog=None,
        automation_marker: str = DEFAULT_AUTOMATION_MARKER,
        launch_delay: float = DEFAULT_LAUNCH_DELAY,
    ):
        super().__init__(catalog)
        self.automation_marker = automation_marker
        self.launch_delay = launch_delay

    def uses_automation(self, bundle_path: str) -> bool:
        bundle_name = PurePosixPath(bundle_path.rstrip("/")).name
        return self.automation_marker.lower() in bundle_name.lower()

    def launch_plan(self, app_path: str, file_path: str) -> list[LaunchStep]:
        if is_app_bundle(app_path):
            if self.uses_automation(app_path):
                return self.automation_plan(app_path, file_path)
            return [
                LaunchStep(
                    f"Open with {app_path}", ("open", "-a", app_path, file_path)
                )
            ]

        if Path(app_path).is_file():
            return direct_launch_plan(app_path, file_path)

        return [LaunchStep("Open with the default handler", ("open", file_path))]

    def automation_plan(self, bundle_path: str, file_path: str) -> list[LaunchStep]:
        """
        Start the bundle, pause, then script the running app to open the file.

        If the bundle cannot be started, `open -a <bundle> <file>` is tried
        instead. If the script cannot be dispatched, the file is handed to
        the system default handler.
        """
        app_name = bundle_app_name(bundle_path)
        start_app = LaunchStep(
            f"Start {app_name}",
            ("open", "-a", bundle_path),
            pause_after=self.launch_delay,
            fallback=LaunchStep(
                f"Open with {bundle_path}", ("open", "-a", bundle_path, file_path)
            ),
        )
        script_open = LaunchStep(
            f"Ask {app_name} to open the file",
            ("osascript", "-e", open_file_script(app_name, file_path)),
            fallback=LaunchStep("Open with the default handler", ("open", file_path)),
        )
        return [start_app, script_open]
