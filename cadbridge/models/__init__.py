"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application, such as settings and operation results.
"""

from .config import BridgeSettings
from .software import (
    ApplicationDescriptor,
    DetectionReport,
    DownloadOutcome,
    LaunchOutcome,
)

__all__ = [
    "ApplicationDescriptor",
    "BridgeSettings",
    "DetectionReport",
    "DownloadOutcome",
    "LaunchOutcome",
]
