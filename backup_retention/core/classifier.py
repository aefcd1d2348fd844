"""Retention classification of backup records."""

import logging
from datetime import datetime, timedelta
from typing import Iterable

from .models import BackupRecord, ClassificationResult


def classify(records: Iterable[BackupRecord], now: datetime, retention_days: int) -> ClassificationResult:
    """Partition records into those to copy and those to delete.

    A record is deleted when it was created strictly before
    ``now - retention_days``; everything else is copied. Input order is
    preserved within each side.

    Args:
        records: Records to classify.
        now: Reference time.
        retention_days: Retention window in days.

    Returns:
        The partition and the cutoff used.

    Raises:
        ValueError: If retention_days is negative.
    """
    if retention_days < 0:
        raise ValueError(f"retention_days must be non-negative, got {retention_days}")

    cutoff = now - timedelta(days=retention_days)
    to_copy = []
    to_delete = []

    for record in records:
        if record.created_at < cutoff:
            to_delete.append(record)
        else:
            to_copy.append(record)

    return ClassificationResult(to_copy=tuple(to_copy), to_delete=tuple(to_delete), cutoff=cutoff)


class RetentionClassifier:
    """Classifies records against a fixed retention window."""

    def __init__(self, retention_days: int = 3):
        self.retention_days = retention_days
        self.logger = logging.getLogger(__name__)

    def classify(self, records: Iterable[BackupRecord], now: datetime) -> ClassificationResult:
        result = classify(records, now, self.retention_days)
        self.logger.info(f"Classified records with cutoff {result.cutoff.isoformat()}: "
                         f"{len(result.to_copy)} to copy, {len(result.to_delete)} to delete")
        return result
