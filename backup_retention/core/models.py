"""Data models for backup retention."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class BackupRecord:
    """One named backup artifact known to the catalogue."""
    name: str
    size_bytes: int
    created_at: datetime
    modified_at: datetime


@dataclass(frozen=True)
class ClassificationResult:
    """Partition of a record set into records to copy and records to delete."""
    to_copy: Tuple[BackupRecord, ...]
    to_delete: Tuple[BackupRecord, ...]
    cutoff: datetime


class EventKind(Enum):
    REMOVED = "removed"
    REMOVE_ABSENT = "remove_absent"
    REMOVE_FAILED = "remove_failed"
    COPIED = "copied"
    COPY_FAILED = "copy_failed"

    @property
    def is_failure(self) -> bool:
        return self in (EventKind.REMOVE_FAILED, EventKind.COPY_FAILED)


@dataclass(frozen=True)
class OperatorEvent:
    """Something the operator should see about a single artifact."""
    kind: EventKind
    name: str
    message: str
    error: Optional[str] = None


@dataclass
class ExecutionReport:
    """Outcome of applying a classification to a file store."""
    removed: List[str] = field(default_factory=list)
    already_absent: List[str] = field(default_factory=list)
    remove_failures: List[str] = field(default_factory=list)
    copied: List[str] = field(default_factory=list)
    copy_failures: List[str] = field(default_factory=list)
    events: List[OperatorEvent] = field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return len(self.remove_failures) + len(self.copy_failures)


class PipelineState(Enum):
    START = "start"
    LOAD_METADATA = "load_metadata"
    LOG_FULL_SET = "log_full_set"
    CLASSIFY = "classify"
    DELETE_PHASE = "delete_phase"
    COPY_PHASE = "copy_phase"
    LOG_COPIED_SET = "log_copied_set"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class RunResult:
    """Terminal status of one retention run."""
    state: PipelineState
    records: List[BackupRecord] = field(default_factory=list)
    classification: Optional[ClassificationResult] = None
    execution: Optional[ExecutionReport] = None
    failed_stage: Optional[PipelineState] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE
