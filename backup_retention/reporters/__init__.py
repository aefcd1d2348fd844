"""Audit log reporting."""

from .audit_logger import AuditLogger, render, render_line

__all__ = ["AuditLogger", "render", "render_line"]
