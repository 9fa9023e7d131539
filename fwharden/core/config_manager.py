"""Configuration manager for loading optional fwharden settings."""

import logging
from pathlib import Path
from typing import Dict, Any, Optional
import yaml

from ..utils.constants import CONFIG_FILE, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the optional settings file.

    Settings only cover logging and output. The override template, its
    target path and the unit name are fixed and cannot be configured.
    """

    CONFIG_VERSION = "1.0"

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize the config manager.

        Args:
            config_file: Settings file to read instead of the default
        """
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self.settings: Dict[str, Any] = {}
        self._ensure_default_settings()

    def load_config(self) -> bool:
        """Load configuration from file.

        Returns:
            True if config loaded successfully, False if defaults are in use
        """
        if not self.config_file.exists():
            logger.debug(f"Config file {self.config_file} not found, using defaults")
            self._load_defaults()
            return False

        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f)

            if not data:
                logger.warning("Empty config file, using defaults")
                self._load_defaults()
                return False

            if not self._validate_config(data):
                logger.error("Invalid config file, using defaults")
                self._load_defaults()
                return False

            self.settings = dict(data.get("settings", {}))
            self._ensure_default_settings()

            logger.debug(f"Loaded settings from {self.config_file}")
            return True

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error in {self.config_file}: {e}")
            self._load_defaults()
            return False
        except OSError as e:
            logger.error(f"Failed to read {self.config_file}: {e}")
            self._load_defaults()
            return False

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        return self.settings.get(key, default)

    def get_log_level(self) -> int:
        """Get the configured log level as a logging constant.

        Returns:
            Logging level, INFO if the configured name is unknown
        """
        name = str(self.get_setting("log_level", DEFAULT_LOG_LEVEL)).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning(f"Unknown log_level {name!r}, using {DEFAULT_LOG_LEVEL}")
            return logging.INFO
        return level

    def _validate_config(self, data) -> bool:
        """Validate configuration data structure.

        Args:
            data: Parsed YAML document

        Returns:
            True if valid, False otherwise
        """
        if not isinstance(data, dict):
            logger.error("Config must be a dictionary")
            return False

        if "version" not in data:
            logger.warning("Config missing version, assuming valid")

        if "settings" in data and not isinstance(data["settings"], dict):
            logger.error("Settings must be a dictionary")
            return False

        return True

    def _load_defaults(self):
        """Load default configuration."""
        self.settings = {}
        self._ensure_default_settings()

    def _ensure_default_settings(self):
        """Ensure all default settings exist."""
        defaults = {
            "log_level": DEFAULT_LOG_LEVEL,
            "log_file": None,
            "quiet": False
        }

        for key, value in defaults.items():
            if key not in self.settings:
                self.settings[key] = value
