"""
Backup Retention - Age-based retention for backup artifacts.

This package classifies catalogued backups by age, deletes the aged ones from
the source location, copies the retained ones to a destination location and
writes audit logs of both sets.
"""

__version__ = "1.0.0"

from .core.pipeline import RetentionPipeline
from .core.classifier import RetentionClassifier, classify
from .config.config_manager import ConfigManager, RetentionConfig

__all__ = ["RetentionPipeline", "RetentionClassifier", "classify", "ConfigManager", "RetentionConfig"]
