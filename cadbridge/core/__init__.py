"""
Core application engine for detecting CAD software and opening drawings.

The `CadFileOpener` coordinates one open request, delegating to the
`SoftwareDetector` for the installed applications and to the `Launcher` for
spawning the chosen one.
"""

from .detector import SoftwareDetector
from .launcher import Launcher, spawn_detached
from .opener import CadFileOpener

__all__ = ["CadFileOpener", "Launcher", "SoftwareDetector", "spawn_detached"]
