"""
Opens a local file in a CAD application by spawning processes.

Processes are fire-and-forget: nothing waits for the application to exit or
checks that the file actually opened.
"""

import logging
import subprocess
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Union

from cadbridge.exceptions import LaunchError
from cadbridge.models.software import ApplicationDescriptor
from cadbridge.platforms.base import LaunchStep, PlatformStrategy

log = logging.getLogger(__name__)

Spawner = Callable[[Sequence[str]], Any]
Application = Union[ApplicationDescriptor, str]


def spawn_detached(command: Sequence[str]) -> subprocess.Popen:
    """Starts a process without attaching to its standard streams."""
    return subprocess.Popen(
        list(command),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


class Launcher:
    """Runs the platform's launch plan for an application and a file."""

    def __init__(
        self,
        strategy: PlatformStrategy,
        spawner: Spawner = spawn_detached,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._strategy = strategy
        self._spawner = spawner
        self._sleep = sleep

    def launch(self, file_path: str | Path, application: Application) -> None:
        """
        Opens `file_path` with `application`.

        Args:
            file_path: Local path of the drawing.
            application: A detected descriptor or a bare executable/bundle path.

        Raises:
            LaunchError: If the final step of the plan could not be spawned.
        """
        if isinstance(application, ApplicationDescriptor):
            app_path = application.exec_path
        else:
            app_path = str(application)

        log.info(f"Opening '{file_path}' with {app_path}")
        plan = self._strategy.launch_plan(app_path, str(file_path))
        self.run_plan(plan)

    def run_plan(self, plan: Sequence[LaunchStep]) -> None:
        """
        Spawns each step in order. A failing step with a fallback hands over to
        that fallback, whose result ends the plan.
        """
        for step in plan:
            try:
                self._spawn(step)
            except LaunchError as e:
                if step.fallback is None:
                    raise
                log.warning(f"{step.label} failed ({e.reason}), trying: {step.fallback.label}")
                self._spawn(step.fallback)
                return

            if step.pause_after > 0:
                log.debug(f"Waiting {step.pause_after:g}s after: {step.label}")
                self._sleep(step.pause_after)

    def _spawn(self, step: LaunchStep) -> None:
        log.debug(f"{step.label}: {' '.join(step.command)}")
        try:
            self._spawner(step.command)
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            raise LaunchError(step.command[0], e) from e
