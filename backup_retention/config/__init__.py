"""Configuration management for backup retention."""

from .config_manager import ConfigManager, RetentionConfig
from .config_validator import ConfigValidator

__all__ = ["ConfigManager", "ConfigValidator", "RetentionConfig"]
