"""Exception types for the backup retention pipeline."""


class RetentionError(Exception):
    """Base error for the project."""


class MetadataError(RetentionError):
    """Backup metadata could not be read or parsed."""


class AuditLogError(RetentionError):
    """An audit log destination could not be created or written."""

    def __init__(self, destination, cause: Exception):
        self.destination = str(destination)
        self.cause = cause
        super().__init__(f"Could not write audit log {self.destination}: {cause}")


class ConfigError(RetentionError, ValueError):
    pass
