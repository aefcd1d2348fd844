"""Execution of a retention classification against a file store."""

import logging
from typing import Iterable

from .models import BackupRecord, ClassificationResult, EventKind, ExecutionReport, OperatorEvent
from .store import FileStore
from .events import EventSink


class ExecutionEngine:
    """Deletes aged artifacts and copies retained ones.

    Per-item failures are reported to the event sink and never interrupt the
    run. Every deletion finishes before the first copy starts. Nothing is
    retried.
    """

    def __init__(self, store: FileStore, events: EventSink):
        """Initialize execution engine.

        Args:
            store: File store holding the source and destination locations.
            events: Sink for operator-visible events.
        """
        self.store = store
        self.events = events
        self.logger = logging.getLogger(__name__)

    def execute(self, classification: ClassificationResult) -> ExecutionReport:
        """Apply a classification.

        Args:
            classification: Records to delete and to copy.

        Returns:
            Report of what was removed, copied and what failed.
        """
        report = self.execute_deletions(classification)
        return self.execute_copies(classification, report)

    def execute_deletions(self, classification: ClassificationResult) -> ExecutionReport:
        report = ExecutionReport()
        self.delete_phase(classification.to_delete, report)
        self.logger.info(f"Deletion phase complete: {len(report.removed)} removed, "
                         f"{len(report.already_absent)} already absent, "
                         f"{len(report.remove_failures)} failures")
        return report

    def execute_copies(self, classification: ClassificationResult,
                       report: ExecutionReport) -> ExecutionReport:
        self.copy_phase(classification.to_copy, report)
        self.logger.info(f"Copy phase complete: {len(report.copied)} copied, "
                         f"{len(report.copy_failures)} failures")
        return report

    def delete_phase(self, records: Iterable[BackupRecord], report: ExecutionReport) -> None:
        for record in records:
            try:
                removed = self.store.remove(record.name)
            except (OSError, ValueError) as e:
                report.remove_failures.append(record.name)
                self._emit(report, EventKind.REMOVE_FAILED, record.name, "Error removing", e)
                continue

            if removed:
                report.removed.append(record.name)
                self._emit(report, EventKind.REMOVED, record.name, "Removed")
            else:
                report.already_absent.append(record.name)
                self._emit(report, EventKind.REMOVE_ABSENT, record.name, "Already absent")

    def copy_phase(self, records: Iterable[BackupRecord], report: ExecutionReport) -> None:
        for record in records:
            try:
                self.store.copy(record.name)
            except (OSError, ValueError) as e:
                report.copy_failures.append(record.name)
                self._emit(report, EventKind.COPY_FAILED, record.name, "Error copying", e)
                continue

            report.copied.append(record.name)
            self._emit(report, EventKind.COPIED, record.name, "Copied")

    def _emit(self, report: ExecutionReport, kind: EventKind, name: str, message: str,
              error: Exception = None) -> None:
        event = OperatorEvent(kind=kind, name=name, message=message,
                              error=str(error) if error is not None else None)
        report.events.append(event)
        self.events.report(event)
