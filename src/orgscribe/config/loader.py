"""Configuration loader with YAML and environment variable support.

This module provides a configuration loader that reads from ~/.config/orgscribe/config.yaml
and allows environment variable overrides using the ORGSCRIBE_WRITER_* prefix.

Environment variables:
- ORGSCRIBE_WRITER_TAGS_COLUMN: Override writer.tags_column
- ORGSCRIBE_WRITER_PROPERTY_FORMAT: Override writer.property_format
- ORGSCRIBE_WRITER_ORG_INDENT_MODE: Override writer.org_indent_mode
- ORGSCRIBE_WRITER_ORG_INDENT_INDENTATION_PER_LEVEL: Override writer.org_indent_indentation_per_level
- ORGSCRIBE_WRITER_SEPARATE_HEADER_AND_CONTENT_WITH_NEW_LINE: Override writer.separate_header_and_content_with_new_line
- ORGSCRIBE_WRITER_SEPARATE_NOTES_WITH_NEW_LINE: Override writer.separate_notes_with_new_line
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from orgscribe.models.config import Config
from orgscribe.utils.logging import get_logger

logger = get_logger(__name__)


def default_config_path() -> Path:
    """Return ~/.config/orgscribe/config.yaml for the current user."""
    return Path.home() / ".config" / "orgscribe" / "config.yaml"


_INT_OVERRIDES = ("tags_column", "org_indent_indentation_per_level")
_BOOL_OVERRIDES = ("org_indent_mode", "separate_header_and_content_with_new_line")
_STR_OVERRIDES = ("property_format", "separate_notes_with_new_line")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def load_config(config_path: Optional[Path] = None, required: bool = False) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Every setting has a default, so a missing file is only an error when
    required is set. An empty file yields the defaults.

    Args:
        config_path: Path to config file. If None, uses ~/.config/orgscribe/config.yaml
        required: Raise if the config file doesn't exist

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If required and the config file doesn't exist
        ValueError: If config file is invalid
    """
    if config_path is None:
        config_path = default_config_path()

    if required and not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found at {config_path}\n\n"
            f"Please create the file with the following format:\n\n"
            f"writer:\n"
            f"  tags_column: 77\n"
            f"  property_format: '%-10s %s'\n"
            f"  org_indent_mode: false\n"
            f"  org_indent_indentation_per_level: 2\n"
            f"  separate_header_and_content_with_new_line: true\n"
            f"  separate_notes_with_new_line: multi_line_notes_only\n"
        )

    if config_path.exists():
        with config_path.open() as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {config_path} must be a mapping")
    else:
        data = {}

    data = _apply_env_overrides(data)

    # Pydantic will validate the structure
    return Config(**data)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Environment variables use the format: ORGSCRIBE_WRITER_KEY
    For example: ORGSCRIBE_WRITER_TAGS_COLUMN sets data['writer']['tags_column']

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    writer = data.get("writer")
    if not isinstance(writer, dict):
        writer = {}
    data["writer"] = writer

    for key in _INT_OVERRIDES:
        if env_value := os.getenv(_env_name(key)):
            try:
                writer[key] = int(env_value)
            except ValueError:
                logger.warning("config_env_override_ignored", variable=_env_name(key), value=env_value)

    for key in _BOOL_OVERRIDES:
        if env_value := os.getenv(_env_name(key)):
            normalized = env_value.strip().lower()
            if normalized in _TRUE_VALUES:
                writer[key] = True
            elif normalized in _FALSE_VALUES:
                writer[key] = False
            else:
                logger.warning("config_env_override_ignored", variable=_env_name(key), value=env_value)

    for key in _STR_OVERRIDES:
        if env_value := os.getenv(_env_name(key)):
            writer[key] = env_value

    return data


def _env_name(key: str) -> str:
    return f"ORGSCRIBE_WRITER_{key.upper()}"
