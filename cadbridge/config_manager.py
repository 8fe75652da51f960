"""
Builds validated settings from the environment and command-line overrides.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from cadbridge.exceptions import ConfigurationError
from cadbridge.models.config import BridgeSettings

log = logging.getLogger(__name__)

ENV_PREFIX = "CADBRIDGE_"


class ConfigManager:
    """Resolves the application settings. Nothing is read from or written to disk."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    def load_config(self, cli_options: dict[str, Any] | None = None) -> BridgeSettings:
        """
        Loads settings from CADBRIDGE_* environment variables, applies CLI
        overrides, and validates them.

        Args:
            cli_options: A dictionary of options provided via the command line.
                Entries whose value is None are ignored.

        Returns:
            A validated BridgeSettings object.

        Raises:
            ConfigurationError: If validation fails.
        """
        settings = self._get_env_as_dict()

        if cli_options:
            settings.update(
                {key: value for key, value in cli_options.items() if value is not None}
            )

        try:
            return BridgeSettings(**settings)
        except ValidationError as e:
            raise ConfigurationError(f"Settings validation failed:\n{e}") from e

    def _get_env_as_dict(self) -> dict[str, Any]:
        """Collects the CADBRIDGE_* variables that map onto known settings."""
        settings = {}
        for key in BridgeSettings.get_env_keys():
            env_name = f"{ENV_PREFIX}{key.upper()}"
            if env_name in self._environ:
                settings[key] = self._environ[env_name]
                log.debug(f"Setting '{key}' taken from {env_name}.")
        return settings
