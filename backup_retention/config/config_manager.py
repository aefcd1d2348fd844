"""Configuration management for the backup retention system."""

import copy
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from .config_validator import ConfigValidator
from ..errors import ConfigError


DEFAULT_CONFIG = {
    'paths': {
        'metadata_file': './valcann/mock.json',
        'source_dir': './valcann/backupsFrom',
        'destination_dir': './valcann/backupsTo',
        'full_log': './valcann/backupsFrom.log',
        'copied_log': './valcann/backupsTo.log'
    },
    'retention': {
        'days': 3
    },
    'logging': {
        'level': 'INFO',
        'file': None
    }
}


@dataclass(frozen=True)
class RetentionConfig:
    """Settings for one retention run."""
    metadata_file: Path
    source_dir: Path
    destination_dir: Path
    full_log: Path
    copied_log: Path
    retention_days: int = 3

    def __post_init__(self):
        days = self.retention_days
        if isinstance(days, bool) or not isinstance(days, int) or days < 0:
            raise ConfigError(f"Retention days must be a non-negative integer: {days!r}")


class ConfigManager:
    """Manages configuration loading and validation for backup retention."""

    DEFAULT_CONFIG_LOCATIONS = [
        "retention.yaml",
        "retention.yml",
        os.path.expanduser("~/.backup-retention/config.yaml"),
        os.path.expanduser("~/.backup-retention/config.yml"),
        "/etc/backup-retention/config.yaml",
        "/etc/backup-retention/config.yml"
    ]

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations and fall back to
                        built-in defaults.
        """
        self.config_path = config_path
        self.config_file: Optional[str] = None
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If an explicit config file cannot be found.
            ConfigError: If config file is invalid.
        """
        self.config_file = self._find_config_file()

        if self.config_file is None:
            self.config_data = {}
        else:
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in config file {self.config_file}: {e}")
            except OSError as e:
                raise ConfigError(f"Error reading config file {self.config_file}: {e}")

        # Validate configuration
        self.validator.validate(self.config_data)

        # Set defaults
        self._set_defaults()

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.

        Returns:
            Path to configuration file, or None when only defaults apply.

        Raises:
            FileNotFoundError: If an explicit config path does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        defaults = copy.deepcopy(DEFAULT_CONFIG)

        # Merge defaults with existing config
        for section, section_defaults in defaults.items():
            if not self.config_data.get(section):
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value

    def get_paths_config(self) -> Dict[str, Any]:
        return self.config_data.get('paths', {})

    def get_retention_config(self) -> Dict[str, Any]:
        return self.config_data.get('retention', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})

    def build_retention_config(self, retention_days: Optional[int] = None,
                               metadata_file: Optional[str] = None) -> RetentionConfig:
        """Build the run settings, applying command-line overrides.

        Args:
            retention_days: Overrides ``retention.days`` when given.
            metadata_file: Overrides ``paths.metadata_file`` when given.

        Returns:
            RetentionConfig for the pipeline.

        Raises:
            ConfigError: If the resulting retention window is invalid.
        """
        if not self.config_data:
            self.load_config()

        paths = self.get_paths_config()
        days = self.get_retention_config().get('days', 3)
        if retention_days is not None:
            days = retention_days

        return RetentionConfig(
            metadata_file=Path(metadata_file or paths['metadata_file']),
            source_dir=Path(paths['source_dir']),
            destination_dir=Path(paths['destination_dir']),
            full_log=Path(paths['full_log']),
            copied_log=Path(paths['copied_log']),
            retention_days=days
        )
