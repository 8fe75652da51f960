"""
Pydantic model for application settings.
Provides robust validation for all settings.
"""

import tempfile
from pathlib import Path

from pydantic import BaseModel, field_validator

from cadbridge import __version__

DEFAULT_LAUNCH_DELAY = 2.0
DEFAULT_AUTOMATION_MARKER = "AutoCAD"


class BridgeSettings(BaseModel):
    """A validated settings model for the application."""

    # Download Settings
    download_dir: str = ""
    request_timeout: float | None = None
    user_agent: str = f"cadbridge/{__version__}"

    # Launch Settings
    launch_delay: float = DEFAULT_LAUNCH_DELAY
    automation_marker: str = DEFAULT_AUTOMATION_MARKER

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("request_timeout", mode="before")
    @classmethod
    def validate_timeout(cls, v):
        """Treats an empty value as 'no timeout' and rejects non-positive ones."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if float(v) <= 0:
            raise ValueError("Request timeout must be greater than zero.")
        return float(v)

    @field_validator("launch_delay")
    @classmethod
    def validate_launch_delay(cls, v: float) -> float:
        """Ensures a reasonable pause before the automation command."""
        if v < 0 or v > 60:
            raise ValueError("Launch delay must be between 0 and 60 seconds.")
        return v

    @field_validator("automation_marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        if not v:
            raise ValueError("Automation marker cannot be empty.")
        return v

    @property
    def destination_dir(self) -> Path:
        """Directory that receives downloaded drawings."""
        if self.download_dir:
            return Path(self.download_dir).expanduser()
        return Path(tempfile.gettempdir())

    @classmethod
    def get_env_keys(cls) -> set[str]:
        """Returns all settings that can be supplied through the environment."""
        return set(cls.model_fields)
