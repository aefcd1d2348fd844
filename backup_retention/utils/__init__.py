"""Utility modules for backup retention."""

from .formatters import format_file_size, format_rfc3339, parse_rfc3339

__all__ = ["format_file_size", "format_rfc3339", "parse_rfc3339"]
