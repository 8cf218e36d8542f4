"""Read the realisation limits from JSON.

Each resolved path is parsed once; later calls for the same file get the
same ``FormatterConfig`` object until ``clear_cache`` is called.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from nlg_formatter.config.models import FormatterConfig

logger = logging.getLogger(__name__)

# Resolved path -> parsed config
_config_cache: dict[str, FormatterConfig] = {}

# Built-in config file, shipped next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "formatter_default.json"


def load_config(path: Optional[Union[str, Path]] = None) -> FormatterConfig:
    """Return the ``FormatterConfig`` stored at *path*.

    Parameters
    ----------
    path : str | Path | None
        JSON file holding ``metadata`` and ``realisation`` sections.
        Falls back to ``formatter_default.json`` when omitted.

    Returns
    -------
    FormatterConfig
        Parsed settings, shared with earlier callers of the same path.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    pydantic.ValidationError
        If ``max_depth`` is out of range or a section has the wrong shape.
    """
    config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = json.loads(config_path.read_text(encoding="utf-8"))
    config = FormatterConfig.model_validate(raw)
    logger.debug("Loaded formatter config from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> FormatterConfig:
    """Settings from the built-in file."""
    return load_config()


def clear_cache() -> None:
    """Forget every parsed file so the next load rereads it."""
    _config_cache.clear()
