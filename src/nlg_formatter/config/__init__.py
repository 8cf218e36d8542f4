"""Formatter configuration package."""

from nlg_formatter.config.loader import get_config, load_config
from nlg_formatter.config.models import FormatterConfig

__all__ = ["FormatterConfig", "get_config", "load_config"]
