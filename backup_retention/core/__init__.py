"""Core retention functionality."""

from .models import BackupRecord, ClassificationResult, ExecutionReport, PipelineState, RunResult
from .classifier import RetentionClassifier, classify
from .store import FileStore, LocalFileStore, InMemoryFileStore, Clock, SystemClock, FixedClock
from .events import EventSink, LoggingEventSink, RecordingEventSink
from .executor import ExecutionEngine
from .metadata import MetadataLoader
from .pipeline import RetentionPipeline

__all__ = [
    "BackupRecord", "ClassificationResult", "ExecutionReport", "PipelineState", "RunResult",
    "RetentionClassifier", "classify",
    "FileStore", "LocalFileStore", "InMemoryFileStore", "Clock", "SystemClock", "FixedClock",
    "EventSink", "LoggingEventSink", "RecordingEventSink",
    "ExecutionEngine", "MetadataLoader", "RetentionPipeline",
]
