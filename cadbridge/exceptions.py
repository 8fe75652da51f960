"""
Defines custom exceptions for the application to allow for more specific error handling.
"""

from enum import Enum


class CadBridgeError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(CadBridgeError):
    """Raised for issues related to settings loading or validation."""


class DownloadFailure(str, Enum):
    """The stage at which a drawing download failed."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    EMPTY_BODY = "empty_body"
    FILE_CREATE = "file_create"
    FILE_WRITE = "file_write"


class DownloadError(CadBridgeError):
    """
    Raised when a drawing cannot be fetched or persisted to the temp directory.

    The `kind` attribute tells transport problems, bad HTTP statuses, empty
    payloads and local filesystem failures apart.
    """

    def __init__(
        self,
        kind: DownloadFailure,
        message: str,
        status: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.body = body


class LaunchError(CadBridgeError):
    """Raised when a CAD application (or a helper tool) cannot be spawned."""

    def __init__(self, tool: str, reason: object):
        self.tool = tool
        self.reason = str(reason)
        super().__init__(f"Failed to start '{tool}': {self.reason}")
