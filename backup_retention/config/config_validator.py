"""Configuration validation for backup retention."""

from typing import Dict, Any

from ..errors import ConfigError


class ConfigValidator:
    """Validates backup retention configuration."""

    KNOWN_SECTIONS = ['paths', 'retention', 'logging']
    PATH_FIELDS = ['metadata_file', 'source_dir', 'destination_dir', 'full_log', 'copied_log']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ConfigError: If configuration is invalid.
        """
        self._validate_structure(config)
        self._validate_paths(config.get('paths') or {})
        self._validate_retention(config.get('retention') or {})
        self._validate_logging(config.get('logging') or {})

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.

        Args:
            config: Configuration dictionary.

        Raises:
            ConfigError: If the document or a known section is not a mapping.
        """
        if not isinstance(config, dict):
            raise ConfigError("Configuration must be a mapping")

        for section in self.KNOWN_SECTIONS:
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigError(f"Configuration section '{section}' must be a mapping")

    def _validate_paths(self, paths: Dict[str, Any]) -> None:
        for field, value in paths.items():
            if field not in self.PATH_FIELDS:
                raise ConfigError(f"Unknown path setting: {field}")
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"Path setting '{field}' must be a non-empty string")

    def _validate_retention(self, retention: Dict[str, Any]) -> None:
        if 'days' not in retention:
            return

        days = retention['days']
        if isinstance(days, bool) or not isinstance(days, int):
            raise ConfigError(f"Retention days must be an integer: {days!r}")
        if days < 0:
            raise ConfigError(f"Retention days cannot be negative: {days}")

    def _validate_logging(self, logging_config: Dict[str, Any]) -> None:
        level = logging_config.get('level')
        if level is not None and str(level).upper() not in self.LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {level}")

        log_file = logging_config.get('file')
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError("Logging file must be a string")
