"""Configuration loading for orgscribe."""

from orgscribe.config.loader import load_config
from orgscribe.config.manager import ConfigManager

__all__ = ["ConfigManager", "load_config"]
