"""
Pydantic models describing CAD applications and the results of the
detection, launch and download operations.
"""

from pydantic import BaseModel, Field, field_validator

from cadbridge.utils.path import normalize_extension


class ApplicationDescriptor(BaseModel):
    """One CAD application candidate and whether it is present on this machine."""

    name: str
    exec_path: str
    extensions: tuple[str, ...] = ()
    software_type: str
    detected: bool = False
    method: str

    class Config:
        """Pydantic model configuration."""

        frozen = True

    @field_validator("extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v):
        """Stores extensions lowercase with a leading dot so matching is case-insensitive."""
        return tuple(normalize_extension(ext) for ext in v if ext and ext.strip())

    def supports(self, extension: str) -> bool:
        return normalize_extension(extension) in self.extensions

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.exec_path})"


class DetectionReport(BaseModel):
    """The present applications found by one detection pass."""

    success: bool = True
    software: list[ApplicationDescriptor] = Field(default_factory=list)
    supported_extensions: list[str] = Field(default_factory=list)


class LaunchOutcome(BaseModel):
    """The structured result handed back to the caller after an open request."""

    success: bool
    software: str | None = None
    message: str
    error: str | None = None

    class Config:
        """Pydantic model configuration."""

        frozen = True


class DownloadOutcome(BaseModel):
    """The structured result of a download-to-temp-file request."""

    success: bool
    path: str | None = None
    message: str
    error: str | None = None

    class Config:
        """Pydantic model configuration."""

        frozen = True
