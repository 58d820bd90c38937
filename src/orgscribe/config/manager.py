"""Configuration manager with logged loading."""

from functools import cached_property
from pathlib import Path

from orgscribe.config.loader import default_config_path, load_config
from orgscribe.models.config import Config, WriterSettings
from orgscribe.utils.logging import get_logger


logger = get_logger(__name__)


class ConfigManager:
    """
    Configuration manager.

    Example:
        >>> config_mgr = ConfigManager.load_default()
        >>> writer_settings = config_mgr.writer
    """

    def __init__(self, config: Config):
        """
        Initialize config manager with loaded config.

        Args:
            config: Loaded and validated Config instance
        """
        self._config = config

    @classmethod
    def load_default(cls) -> "ConfigManager":
        """
        Load configuration from default path (~/.config/orgscribe/config.yaml).

        A missing default file yields the default settings.

        Returns:
            ConfigManager instance with loaded config

        Raises:
            ValueError: If config is invalid
        """
        return cls._load(default_config_path(), required=False)

    @classmethod
    def load_from_path(cls, path: Path) -> "ConfigManager":
        """
        Load configuration from specific path.

        Args:
            path: Path to config.yaml file

        Returns:
            ConfigManager instance with loaded config

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        return cls._load(path, required=True)

    @classmethod
    def _load(cls, path: Path, required: bool) -> "ConfigManager":
        logger.info("config_loading", path=str(path))

        try:
            config = load_config(path, required=required)
            logger.info("config_loaded", path=str(path))
            return cls(config)

        except FileNotFoundError as e:
            logger.error("config_not_found", path=str(path), error=str(e))
            raise

        except Exception as e:
            logger.error("config_validation_error", path=str(path), error=str(e))
            raise ValueError(f"Configuration validation failed: {e}") from e

    @cached_property
    def writer(self) -> WriterSettings:
        """
        Get Org writer settings (defaults if not specified).

        Returns:
            Validated writer settings
        """
        return self._config.writer
