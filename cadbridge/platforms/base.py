"""
The platform capability shared by detection and launching.

A PlatformStrategy owns the catalog for one operating system, knows how to
check that a candidate is installed, and turns an (application, file) pair
into an ordered launch plan.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cadbridge.models.software import ApplicationDescriptor
from cadbridge.platforms.catalog import USERNAME_PLACEHOLDER, CatalogEntry


def current_username() -> str:
    """Returns the current user's name from the environment, or an empty string."""
    return os.environ.get("USERNAME") or os.environ.get("USER") or ""


def expand_path_template(template: str, username: str | None = None) -> str:
    """Substitutes the username placeholder in a catalog path template."""
    if username is None:
        username = current_username()
    return template.replace(USERNAME_PLACEHOLDER, username)


@dataclass(frozen=True)
class LaunchStep:
    """
    One process spawn within a launch plan.

    Attributes:
        label: Human-readable description used in logs.
        command: Program and arguments passed to the spawner.
        pause_after: Seconds to wait after a successful spawn.
        fallback: Step to spawn instead when this one fails; its result
            ends the plan.
    """

    label: str
    command: tuple[str, ...]
    pause_after: float = 0.0
    fallback: Optional[LaunchStep] = None


def direct_launch_plan(app_path: str, file_path: str) -> list[LaunchStep]:
    """Spawns the application with the file as its only argument."""
    return [LaunchStep(f"Start {app_path}", (app_path, file_path))]


class PlatformStrategy(ABC):
    """Base class for the per-OS detection and launch behavior."""

    name: str = ""
    detection_method: str = ""
    default_catalog: tuple[CatalogEntry, ...] = ()

    def __init__(self, catalog: Iterable[CatalogEntry] | None = None):
        self.catalog = tuple(catalog) if catalog is not None else self.default_catalog

    def candidates(self) -> list[ApplicationDescriptor]:
        """Builds not-yet-detected descriptors from the catalog, in catalog order."""
        username = current_username()
        return [
            ApplicationDescriptor(
                name=entry.name,
                exec_path=expand_path_template(entry.path_template, username),
                extensions=entry.extensions,
                software_type=entry.software_type,
                detected=False,
                method=self.detection_method,
            )
            for entry in self.catalog
        ]

    def is_present(self, descriptor: ApplicationDescriptor) -> bool:
        """Checks that the executable or bundle exists at the descriptor's path."""
        return Path(descriptor.exec_path).exists()

    @abstractmethod
    def launch_plan(self, app_path: str, file_path: str) -> list[LaunchStep]:
        """Returns the ordered steps that open `file_path` with `app_path`."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self.catalog)})"
