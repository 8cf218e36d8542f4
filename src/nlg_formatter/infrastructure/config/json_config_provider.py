"""JSON config provider — implements ConfigProviderPort.

Wraps the config/loader.py logic.
"""

from __future__ import annotations

from typing import Any

from nlg_formatter.domain.errors import ConfigurationError
from nlg_formatter.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load formatter configuration from JSON files."""

    def __init__(self, config_path: str | None = None) -> None:
        self._config_path = config_path
        self._config: Any = None

    def get_config(self) -> Any:
        """Return the current formatter configuration, loading lazily.

        Raises:
            ConfigurationError: If the file is missing or fails validation.
        """
        if self._config is None:
            from nlg_formatter.config.loader import load_config

            try:
                self._config = load_config(self._config_path)
            except (FileNotFoundError, ValueError) as exc:
                raise ConfigurationError(f"Invalid configuration: {exc}") from exc
        return self._config
